"""WSGI entry point.

``gunicorn -c deploy/gunicorn.conf.py`` serves ``app``; the production config
starts the refresh scheduler. ``python wsgi.py`` runs the Werkzeug dev server
and starts the scheduler as well, so the snapshot is refreshed locally too.
"""
import logging

from leetboard import create_app

app = create_app()

if __name__ == '__main__':
    from leetboard.tasks.scheduler import ensure_scheduler

    logging.basicConfig(level=logging.INFO, format=app.config['LOG_FORMAT'])
    ensure_scheduler(app)
    app.run(port=app.config['PORT'], debug=app.config.get('DEBUG', False),
            use_reloader=False)
