"""Shared test fixtures for the LeetBoard test suite."""

import pytest

from leetboard import create_app

PREFIX = 'https://leetcode.com/u/'


def _write_lines(path, lines):
    with open(path, 'w', encoding='utf-8') as f:
        f.write('\n'.join(lines) + '\n')


@pytest.fixture()
def roster_paths(tmp_path):
    """Paths of the five roster files inside a temp directory."""
    return {
        'ROSTER_ROLL_FILE': str(tmp_path / 'roll.txt'),
        'ROSTER_NAME_FILE': str(tmp_path / 'name.txt'),
        'ROSTER_URL_FILE': str(tmp_path / 'urls.txt'),
        'ROSTER_SECTION_FILE': str(tmp_path / 'sections.txt'),
        'ROSTER_DAY_FILE': str(tmp_path / 'day.txt'),
    }


@pytest.fixture()
def write_roster(roster_paths):
    """Return a helper that writes the roster files.

    Called as ``write_roster(rolls, names, urls, sections, days)``; each
    argument is a list of lines.
    """
    def _write(rolls, names, urls, sections, days):
        _write_lines(roster_paths['ROSTER_ROLL_FILE'], rolls)
        _write_lines(roster_paths['ROSTER_NAME_FILE'], names)
        _write_lines(roster_paths['ROSTER_URL_FILE'], urls)
        _write_lines(roster_paths['ROSTER_SECTION_FILE'], sections)
        _write_lines(roster_paths['ROSTER_DAY_FILE'], days)
    return _write


@pytest.fixture()
def snapshot_path(tmp_path):
    return str(tmp_path / 'snapshot' / 'data.json')


@pytest.fixture()
def app(roster_paths, snapshot_path):
    """Create a Flask application configured for testing."""
    overrides = dict(roster_paths)
    overrides['SNAPSHOT_PATH'] = snapshot_path
    overrides['LEETCODE_PROFILE_PREFIX'] = PREFIX
    application = create_app('testing', config_overrides=overrides)
    yield application


@pytest.fixture()
def client(app):
    """Provide a Flask test client."""
    return app.test_client()


@pytest.fixture()
def two_student_roster(write_roster):
    """One student with a LeetCode profile, one without."""
    write_roster(
        rolls=['21CS001', '21CS002'],
        names=['Alice', 'Bob'],
        urls=[PREFIX + 'alice/', 'https://github.com/bob'],
        sections=['A', 'B'],
        days=['Mon', 'Tue'],
    )
