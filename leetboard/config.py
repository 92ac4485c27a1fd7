import os


def _optional_float(value):
    return float(value) if value else None


class BaseConfig:
    """Base configuration shared across all environments."""

    # Roster sources: one field per line, aligned by position
    ROSTER_DIR = os.environ.get('ROSTER_DIR', '.')
    ROSTER_ROLL_FILE = os.environ.get(
        'ROSTER_ROLL_FILE', os.path.join(ROSTER_DIR, 'roll.txt')
    )
    ROSTER_NAME_FILE = os.environ.get(
        'ROSTER_NAME_FILE', os.path.join(ROSTER_DIR, 'name.txt')
    )
    ROSTER_URL_FILE = os.environ.get(
        'ROSTER_URL_FILE', os.path.join(ROSTER_DIR, 'urls.txt')
    )
    ROSTER_SECTION_FILE = os.environ.get(
        'ROSTER_SECTION_FILE', os.path.join(ROSTER_DIR, 'sections.txt')
    )
    ROSTER_DAY_FILE = os.environ.get(
        'ROSTER_DAY_FILE', os.path.join(ROSTER_DIR, 'day.txt')
    )

    # Persisted leaderboard snapshot and static frontend
    SNAPSHOT_PATH = os.environ.get('SNAPSHOT_PATH', 'data.json')
    PUBLIC_DIR = os.environ.get('PUBLIC_DIR', 'public')

    # Upstream LeetCode settings
    LEETCODE_GRAPHQL_URL = os.environ.get(
        'LEETCODE_GRAPHQL_URL', 'https://leetcode.com/graphql'
    )
    LEETCODE_PROFILE_PREFIX = os.environ.get(
        'LEETCODE_PROFILE_PREFIX', 'https://leetcode.com/u/'
    )
    LEETCODE_RECENT_LIMIT = int(os.environ.get('LEETCODE_RECENT_LIMIT', '3'))
    # Seconds; unset means requests waits indefinitely
    LEETCODE_REQUEST_TIMEOUT = _optional_float(
        os.environ.get('LEETCODE_REQUEST_TIMEOUT', '')
    )

    # Refresh pipeline
    REFRESH_INTERVAL_SECONDS = int(
        os.environ.get('REFRESH_INTERVAL_SECONDS', '3600')
    )
    REFRESH_MAX_WORKERS = int(os.environ.get('REFRESH_MAX_WORKERS', '16'))

    # Scheduler
    SCHEDULER_ENABLED = os.environ.get(
        'SCHEDULER_ENABLED', 'false'
    ).lower() in ('true', '1', 'yes')

    # Logging
    LOG_FILE_MAX_BYTES = int(os.environ.get('LOG_FILE_MAX_BYTES', '0'))
    LOG_FILE_BACKUP_COUNT = int(os.environ.get('LOG_FILE_BACKUP_COUNT', '3'))
    LOG_FORMAT = os.environ.get(
        'LOG_FORMAT', '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
    )

    PORT = int(os.environ.get('PORT', '3001'))


class DevelopmentConfig(BaseConfig):
    """Development environment configuration."""

    DEBUG = True


class ProductionConfig(BaseConfig):
    """Production environment configuration."""

    DEBUG = False
    SCHEDULER_ENABLED = os.environ.get(
        'SCHEDULER_ENABLED', 'true'
    ).lower() in ('true', '1', 'yes')
    LOG_FILE_MAX_BYTES = int(os.environ.get('LOG_FILE_MAX_BYTES', str(5 * 1024 * 1024)))


class TestingConfig(BaseConfig):
    """Testing environment configuration."""

    TESTING = True
    DEBUG = True
    SCHEDULER_ENABLED = False
    LOG_FILE_MAX_BYTES = 0
    REFRESH_MAX_WORKERS = 4


config_map = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
}
