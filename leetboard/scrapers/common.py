from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from enum import Enum


class Difficulty(str, Enum):
    ALL = 'All'
    EASY = 'Easy'
    MEDIUM = 'Medium'
    HARD = 'Hard'


# Difficulty label -> Stats attribute
_DIFFICULTY_FIELDS = {
    Difficulty.ALL: 'totalSolved',
    Difficulty.EASY: 'easySolved',
    Difficulty.MEDIUM: 'mediumSolved',
    Difficulty.HARD: 'hardSolved',
}


@dataclass
class Stats:
    totalSolved: int = 0
    easySolved: int = 0
    mediumSolved: int = 0
    hardSolved: int = 0

    @classmethod
    def from_ac_counts(cls, ac_submission_num: list[dict]) -> Stats:
        """Build Stats from upstream ``acSubmissionNum`` entries.

        Each entry is ``{'difficulty': ..., 'count': ...}``. Labels other
        than All/Easy/Medium/Hard are ignored.
        """
        stats = cls()
        for item in ac_submission_num:
            try:
                difficulty = Difficulty(item['difficulty'])
            except ValueError:
                continue
            setattr(stats, _DIFFICULTY_FIELDS[difficulty], int(item['count']))
        return stats

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class Submission:
    id: str | None = None
    title: str | None = None
    timestamp: str | None = None
    statusDisplay: str | None = None
    runtime: str | None = None
    memory: str | None = None
    lang: str | None = None

    @classmethod
    def from_upstream(cls, item: dict) -> Submission:
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in item.items() if k in known})

    def to_dict(self) -> dict:
        return asdict(self)
