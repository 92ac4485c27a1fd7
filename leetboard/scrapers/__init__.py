from .common import Difficulty, Stats, Submission
from .leetcode import LeetCodeScraper
from .url_parser import parse_profile_url

__all__ = [
    'Difficulty',
    'LeetCodeScraper',
    'Stats',
    'Submission',
    'parse_profile_url',
]
