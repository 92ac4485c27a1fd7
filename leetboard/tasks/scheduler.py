import logging
from datetime import datetime

from apscheduler.schedulers.background import BackgroundScheduler

logger = logging.getLogger(__name__)
scheduler = BackgroundScheduler()


def run_refresh(app):
    """Run one leaderboard refresh inside the app context."""
    with app.app_context():
        from leetboard.services.refresh_service import RefreshService

        try:
            saved = RefreshService.from_config(app.config).refresh()
        except Exception:
            logger.exception("Scheduled refresh crashed")
            return False
        if not saved:
            logger.warning("Scheduled refresh did not update the snapshot")
        return saved


def init_scheduler(app):
    """Initialize and start the scheduler with app context."""
    if not app.config.get('SCHEDULER_ENABLED', False):
        logger.info("Scheduler disabled by config")
        return

    interval = app.config.get('REFRESH_INTERVAL_SECONDS', 3600)

    # Refresh at startup, then every interval
    @scheduler.scheduled_job(
        'interval',
        seconds=interval,
        id='refresh_leaderboard',
        next_run_time=datetime.now(),
        replace_existing=True,
    )
    def refresh_job():
        run_refresh(app)

    try:
        scheduler.start()
        logger.info(f"Scheduler started, refreshing every {interval}s")
    except Exception as e:
        logger.error(f"Scheduler failed to start: {e}")


def ensure_scheduler(app):
    """Start the refresh job regardless of SCHEDULER_ENABLED.

    Used by the local dev server, whose config leaves the scheduler off so
    that importing the app (tests, scripts) does not start background work.
    """
    if scheduler.running:
        return
    app.config['SCHEDULER_ENABLED'] = True
    init_scheduler(app)
