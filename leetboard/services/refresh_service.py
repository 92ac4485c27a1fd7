"""Refresh pipeline: roster + LeetCode stats -> ranked snapshot.

Per-student fetches run on a ``ThreadPoolExecutor`` bounded by
``REFRESH_MAX_WORKERS``. The scraper never raises, so a slow or failing
profile only delays the batch.
"""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed

from leetboard.scrapers.leetcode import LeetCodeScraper
from leetboard.scrapers.url_parser import parse_profile_url
from leetboard.services.roster_service import (
    NO_DATA_INFO, RosterEntry, RosterLoader, RosterMismatchError,
)
from leetboard.services.snapshot_store import SnapshotStore

logger = logging.getLogger(__name__)


def rank_records(records: list[dict]) -> list[dict]:
    """Sort records by totalSolved, highest first; missing counts as 0."""
    return sorted(records, key=lambda r: r.get('totalSolved') or 0, reverse=True)


def _timestamp_key(item: dict) -> int:
    try:
        return int(item.get('timestamp') or 0)
    except (TypeError, ValueError):
        return 0


class RefreshService:
    def __init__(self, loader: RosterLoader, store: SnapshotStore,
                 scraper: LeetCodeScraper, profile_prefix: str,
                 max_workers: int = 16):
        self.loader = loader
        self.store = store
        self.scraper = scraper
        self.profile_prefix = profile_prefix
        self.max_workers = max(1, max_workers)

    @classmethod
    def from_config(cls, config) -> RefreshService:
        return cls(
            loader=RosterLoader.from_config(config),
            store=SnapshotStore.from_config(config),
            scraper=LeetCodeScraper.from_config(config),
            profile_prefix=config['LEETCODE_PROFILE_PREFIX'],
            max_workers=config.get('REFRESH_MAX_WORKERS', 16),
        )

    def refresh(self) -> bool:
        """Run one refresh cycle. Returns True if a snapshot was written.

        Roster problems abort the cycle and leave the previous snapshot in
        place; nothing is raised to the caller.
        """
        try:
            roster = self.loader.load()
        except RosterMismatchError as e:
            logger.error(f"Refresh aborted: {e}")
            return False
        except OSError as e:
            logger.error(f"Refresh aborted, could not read roster: {e}")
            return False

        entries = list(roster.entries())
        records = []
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = {
                executor.submit(self._build_record, entry): entry
                for entry in entries
            }
            for future in as_completed(futures):
                try:
                    records.append(future.result())
                except Exception as e:
                    # _build_record only fails on programming errors; keep
                    # the student on the board without stats.
                    entry = futures[future]
                    logger.error(f"Error building record for {entry.roll}: {e}")
                    records.append(entry.to_record())

        ranked = rank_records(records)
        try:
            self.store.write(ranked)
        except OSError as e:
            logger.error(f"Failed to save snapshot to {self.store.path}: {e}")
            return False

        logger.info(f"Leaderboard refreshed: {len(ranked)} students saved to {self.store.path}")
        return True

    def _build_record(self, entry: RosterEntry) -> dict:
        record = entry.to_record()
        username = parse_profile_url(entry.url, self.profile_prefix)
        if not username:
            record['info'] = NO_DATA_INFO
            return record

        stats, recent = self.scraper.fetch_user_stats(username)
        record['username'] = username
        record.update(stats.to_dict())
        record['recentSubmissions'] = [s.to_dict() for s in recent]
        return record

    def recent_submissions(self) -> list[dict]:
        """Live feed of recent accepted submissions across the roster.

        Bypasses the snapshot. Roster errors propagate to the caller.
        """
        profiles = self.loader.load_profiles(self.profile_prefix)
        usernames = [username for _, username in profiles]
        if not usernames:
            return []

        feed = []
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = {
                executor.submit(self.scraper.fetch_recent_submissions, username): username
                for username in usernames
            }
            for future in as_completed(futures):
                username = futures[future]
                for submission in future.result():
                    feed.append({
                        'username': username,
                        'title': submission.title,
                        'timestamp': submission.timestamp,
                    })

        feed.sort(key=_timestamp_key, reverse=True)
        return feed
