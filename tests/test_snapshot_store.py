"""Tests for the file-backed snapshot store."""

import json
import os
import stat
from unittest.mock import patch

import pytest

from leetboard.services.snapshot_store import SnapshotStore, SnapshotUnavailableError


@pytest.fixture()
def store(snapshot_path):
    return SnapshotStore(snapshot_path)


class TestSnapshotStore:
    def test_empty_store(self, store):
        assert not store.exists()
        assert store.read_raw() is None
        with pytest.raises(SnapshotUnavailableError):
            store.read()

    def test_write_creates_directory(self, store, snapshot_path):
        store.write([{'roll': '1', 'totalSolved': 3}])

        assert store.exists()
        assert os.path.isfile(snapshot_path)
        assert store.read() == [{'roll': '1', 'totalSolved': 3}]

    def test_pretty_printed(self, store):
        store.write([{'roll': '1'}])

        raw = store.read_raw().decode('utf-8')
        assert raw == json.dumps([{'roll': '1'}], indent=2)

    def test_non_ascii_preserved(self, store):
        store.write([{'name': 'Zoë'}])

        assert 'Zoë' in store.read_raw().decode('utf-8')

    def test_write_replaces_previous(self, store, snapshot_path):
        store.write([{'roll': '1'}, {'roll': '2'}])
        store.write([{'roll': '3'}])

        assert store.read() == [{'roll': '3'}]
        assert sorted(os.listdir(os.path.dirname(snapshot_path))) == ['data.json']

    def test_snapshot_mode_follows_umask(self, store, snapshot_path):
        mask = os.umask(0o022)
        try:
            store.write([{'roll': '1'}])
        finally:
            os.umask(mask)

        assert stat.S_IMODE(os.stat(snapshot_path).st_mode) == 0o644

    def test_failed_write_keeps_previous(self, store, snapshot_path):
        store.write([{'roll': '1'}])
        before = store.read_raw()

        with patch('leetboard.services.snapshot_store.json.dump',
                   side_effect=TypeError('not serializable')):
            with pytest.raises(TypeError):
                store.write([{'roll': '2'}])

        assert store.read_raw() == before
        assert sorted(os.listdir(os.path.dirname(snapshot_path))) == ['data.json']

    def test_malformed_snapshot(self, store, snapshot_path):
        os.makedirs(os.path.dirname(snapshot_path))
        with open(snapshot_path, 'w') as f:
            f.write('[{"roll": ')

        with pytest.raises(ValueError):
            store.read()

    def test_from_config(self, snapshot_path):
        store = SnapshotStore.from_config({'SNAPSHOT_PATH': snapshot_path})
        assert store.path == os.path.abspath(snapshot_path)
