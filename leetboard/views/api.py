import logging

from flask import Blueprint, Response, current_app, jsonify

from leetboard.services.csv_export import records_to_csv
from leetboard.services.refresh_service import RefreshService
from leetboard.services.snapshot_store import SnapshotStore

logger = logging.getLogger(__name__)

api_bp = Blueprint('api', __name__)


@api_bp.route('/data')
def leaderboard_data():
    raw = SnapshotStore.from_config(current_app.config).read_raw()
    if raw is None:
        return jsonify({'message': 'No leaderboard data available yet.'}), 404
    return Response(raw, mimetype='application/json')


@api_bp.route('/recent-submissions')
def recent_submissions():
    try:
        feed = RefreshService.from_config(current_app.config).recent_submissions()
    except Exception as e:
        logger.error(f"Error fetching recent submissions: {e}")
        return jsonify({'message': 'Error fetching recent submissions.'}), 500

    if not feed:
        return jsonify({'message': 'No recent submissions found.'}), 404
    return jsonify(feed)


@api_bp.route('/export-csv')
def export_csv():
    try:
        records = SnapshotStore.from_config(current_app.config).read()
        csv_text = records_to_csv(records)
    except Exception as e:
        logger.error(f"Error exporting to CSV: {e}")
        return jsonify({'message': 'Error exporting to CSV.'}), 500

    return Response(
        csv_text,
        mimetype='text/csv',
        headers={'Content-Disposition': 'attachment; filename=leaderboard.csv'},
    )
