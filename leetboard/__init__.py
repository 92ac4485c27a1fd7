import logging
import os

from logging.handlers import RotatingFileHandler

from dotenv import load_dotenv
from flask import Flask, send_from_directory
from flask_cors import CORS

from leetboard.config import config_map

__version__ = '1.0.0'

_PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))


def create_app(config_name=None, config_overrides=None):
    """Application factory for creating the Flask app instance.

    Args:
        config_name: Configuration name ('development', 'production' or
                     'testing'). Defaults to FLASK_ENV or 'development'.
        config_overrides: Optional mapping applied on top of the config
                          class, mainly used by tests to point the app at
                          temporary roster and snapshot files.

    Returns:
        Configured Flask application instance.
    """
    # Load environment variables from the appropriate .env file
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    env_file = os.path.join(_PROJECT_ROOT, f'.env.{env}')
    if os.path.exists(env_file):
        load_dotenv(env_file)

    # Also load a local .env if it exists (overrides the environment-specific one)
    dotenv_path = os.path.join(_PROJECT_ROOT, '.env')
    if os.path.exists(dotenv_path):
        load_dotenv(dotenv_path, override=True)

    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    config_class = config_map.get(config_name, config_map['development'])

    app = Flask(
        __name__,
        static_folder=os.path.abspath(config_class.PUBLIC_DIR),
        static_url_path='',
    )
    app.config.from_object(config_class)
    if config_overrides:
        app.config.update(config_overrides)
    app.static_folder = os.path.abspath(app.config['PUBLIC_DIR'])

    CORS(app)

    _configure_logging(app)
    _register_blueprints(app)

    @app.route('/')
    def index():
        return send_from_directory(app.static_folder, 'index.html')

    if app.config.get('SCHEDULER_ENABLED'):
        _init_scheduler(app)

    return app


def _configure_logging(app):
    """Set up RotatingFileHandler on the root logger."""
    max_bytes = app.config.get('LOG_FILE_MAX_BYTES', 0)
    if not max_bytes:
        return

    log_dir = os.path.join(app.instance_path, 'logs')
    os.makedirs(log_dir, exist_ok=True)

    log_file = os.path.join(log_dir, 'app.log')
    handler = RotatingFileHandler(
        log_file,
        maxBytes=max_bytes,
        backupCount=app.config.get('LOG_FILE_BACKUP_COUNT', 3),
    )
    handler.setFormatter(logging.Formatter(
        app.config.get('LOG_FORMAT', '%(asctime)s [%(levelname)s] %(name)s: %(message)s')
    ))
    handler.setLevel(logging.DEBUG)

    root = logging.getLogger()
    root.addHandler(handler)
    if root.level == logging.WARNING:
        root.setLevel(logging.INFO)


def _register_blueprints(app):
    """Register all application blueprints."""
    from leetboard.views.api import api_bp

    app.register_blueprint(api_bp)


def _init_scheduler(app):
    """Initialize and start APScheduler for the periodic refresh."""
    from leetboard.tasks.scheduler import init_scheduler
    init_scheduler(app)
