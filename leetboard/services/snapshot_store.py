"""File-backed store for the ranked leaderboard snapshot."""
from __future__ import annotations

import json
import os
import tempfile


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


class SnapshotUnavailableError(Exception):
    """No snapshot has been written yet."""


class SnapshotStore:
    """Holds the latest leaderboard as a pretty-printed JSON file.

    ``write`` replaces the file atomically (temp file in the same directory,
    then ``os.replace``) so readers see either the old or the new snapshot,
    never a partial one.
    """

    def __init__(self, path: str):
        self.path = os.path.abspath(path)

    @classmethod
    def from_config(cls, config) -> SnapshotStore:
        return cls(config['SNAPSHOT_PATH'])

    def exists(self) -> bool:
        return os.path.isfile(self.path)

    def write(self, records: list[dict]) -> None:
        directory = os.path.dirname(self.path)
        os.makedirs(directory, exist_ok=True)

        fd, tmp = tempfile.mkstemp(
            prefix=os.path.basename(self.path) + '.', suffix='.tmp', dir=directory
        )
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                json.dump(records, f, indent=2, ensure_ascii=False)
                f.flush()
                os.fsync(f.fileno())
            # mkstemp creates the file 0600; give the snapshot the usual umask mode.
            os.chmod(tmp, 0o666 & ~_current_umask())
            os.replace(tmp, self.path)
        except BaseException:
            if os.path.exists(tmp):
                os.remove(tmp)
            raise

    def read_raw(self) -> bytes | None:
        """Return the snapshot bytes, or None if nothing was written yet."""
        try:
            with open(self.path, 'rb') as f:
                return f.read()
        except FileNotFoundError:
            return None

    def read(self) -> list[dict]:
        """Return the parsed snapshot.

        Raises:
            SnapshotUnavailableError: no snapshot file exists.
            ValueError: the file is not valid JSON.
        """
        raw = self.read_raw()
        if raw is None:
            raise SnapshotUnavailableError(f'No snapshot at {self.path}')
        return json.loads(raw.decode('utf-8'))
