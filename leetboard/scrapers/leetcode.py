from __future__ import annotations

from .base import BaseScraper
from .common import Stats, Submission


USER_STATS_QUERY = """
query userStats($username: String!) {
  matchedUser(username: $username) {
    username
    submitStats: submitStatsGlobal {
      acSubmissionNum {
        difficulty
        count
        submissions
      }
    }
  }
}
"""

RECENT_AC_QUERY = """
query recentAcSubmissions($username: String!, $limit: Int!) {
  recentAcSubmissionList(username: $username, limit: $limit) {
    id
    title
    timestamp
    statusDisplay
    runtime
    memory
    lang
  }
}
"""


class LeetCodeScraper(BaseScraper):
    PLATFORM_NAME = "leetcode"
    BASE_URL = "https://leetcode.com"
    GRAPHQL_URL = "https://leetcode.com/graphql"

    def __init__(self, graphql_url: str = None, timeout: float = None, recent_limit: int = 3):
        super().__init__(graphql_url=graphql_url, timeout=timeout)
        self.recent_limit = recent_limit

    @classmethod
    def from_config(cls, config) -> LeetCodeScraper:
        return cls(
            graphql_url=config.get('LEETCODE_GRAPHQL_URL'),
            timeout=config.get('LEETCODE_REQUEST_TIMEOUT'),
            recent_limit=config.get('LEETCODE_RECENT_LIMIT', 3),
        )

    def fetch_user_stats(self, username: str) -> tuple[Stats, list[Submission]]:
        """Fetch solved counts and recent accepted submissions for a user.

        Never raises: any failure is logged and reported as zeroed stats
        with no submissions, so one bad profile cannot sink a batch.
        """
        try:
            stats_data = self._graphql(USER_STATS_QUERY, {'username': username})
            recent = self._query_recent(username)

            ac_counts = stats_data['matchedUser']['submitStats']['acSubmissionNum'] or []
            return Stats.from_ac_counts(ac_counts), recent
        except Exception as e:
            self.logger.error(f"Error fetching LeetCode data for {username}: {e}")
            return Stats(), []

    def fetch_recent_submissions(self, username: str) -> list[Submission]:
        """Fetch only the recent accepted submissions; [] on any failure."""
        try:
            return self._query_recent(username)
        except Exception as e:
            self.logger.error(f"Error fetching recent submissions for {username}: {e}")
            return []

    def _query_recent(self, username: str) -> list[Submission]:
        data = self._graphql(
            RECENT_AC_QUERY, {'username': username, 'limit': self.recent_limit}
        )
        items = data['recentAcSubmissionList'] or []
        return [Submission.from_upstream(item) for item in items]
