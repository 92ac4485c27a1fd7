"""Parse LeetCode profile URLs into usernames."""
from __future__ import annotations

DEFAULT_PROFILE_PREFIX = 'https://leetcode.com/u/'


def parse_profile_url(url: str, prefix: str = DEFAULT_PROFILE_PREFIX) -> str | None:
    """Return the username in a profile URL, or None if it is not one.

    Only URLs starting with ``prefix`` are recognised. A single trailing
    slash is dropped: ``https://leetcode.com/u/alice/`` -> ``alice``.
    """
    if not url or not url.startswith(prefix):
        return None

    username = url[len(prefix):]
    if username.endswith('/'):
        username = username[:-1]
    return username or None
