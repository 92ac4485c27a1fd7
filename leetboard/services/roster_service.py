"""Roster loading from the line-oriented roster files."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator

from leetboard.scrapers.url_parser import DEFAULT_PROFILE_PREFIX, parse_profile_url

logger = logging.getLogger(__name__)

NO_DATA_INFO = 'No LeetCode data available'


class RosterMismatchError(Exception):
    """Roll, name, URL and section files disagree on the number of entries."""


@dataclass
class RosterEntry:
    roll: str
    name: str
    url: str
    section: str
    day: str = ''

    def to_record(self) -> dict:
        return {
            'roll': self.roll,
            'name': self.name,
            'url': self.url,
            'section': self.section,
            'day': self.day,
        }


@dataclass
class Roster:
    rolls: list[str] = field(default_factory=list)
    names: list[str] = field(default_factory=list)
    urls: list[str] = field(default_factory=list)
    sections: list[str] = field(default_factory=list)
    days: list[str] = field(default_factory=list)

    def __len__(self):
        return len(self.rolls)

    def entries(self) -> Iterator[RosterEntry]:
        # The day file is not required to line up with the others; missing
        # trailing days become ''.
        if len(self.days) < len(self.rolls):
            logger.warning(
                f"Day file has {len(self.days)} entries for {len(self.rolls)} "
                f"students; missing days left blank"
            )
        for i in range(len(self.rolls)):
            yield RosterEntry(
                roll=self.rolls[i],
                name=self.names[i],
                url=self.urls[i],
                section=self.sections[i],
                day=self.days[i] if i < len(self.days) else '',
            )


def read_lines(path: str) -> list[str]:
    """Read a roster file: stripped lines, blanks dropped."""
    with open(path, encoding='utf-8') as f:
        return [line.strip() for line in f if line.strip()]


class RosterLoader:
    def __init__(self, roll_path: str, name_path: str, url_path: str,
                 section_path: str, day_path: str):
        self.roll_path = roll_path
        self.name_path = name_path
        self.url_path = url_path
        self.section_path = section_path
        self.day_path = day_path

    @classmethod
    def from_config(cls, config) -> RosterLoader:
        return cls(
            roll_path=config['ROSTER_ROLL_FILE'],
            name_path=config['ROSTER_NAME_FILE'],
            url_path=config['ROSTER_URL_FILE'],
            section_path=config['ROSTER_SECTION_FILE'],
            day_path=config['ROSTER_DAY_FILE'],
        )

    def load(self) -> Roster:
        """Read all five roster files.

        Raises:
            RosterMismatchError: roll/name/url/section counts differ.
            OSError: a roster file could not be read.
        """
        roster = Roster(
            rolls=read_lines(self.roll_path),
            names=read_lines(self.name_path),
            urls=read_lines(self.url_path),
            sections=read_lines(self.section_path),
            days=read_lines(self.day_path),
        )

        counts = {
            'rolls': len(roster.rolls),
            'names': len(roster.names),
            'urls': len(roster.urls),
            'sections': len(roster.sections),
        }
        if len(set(counts.values())) != 1:
            raise RosterMismatchError(
                'The number of rolls, names, URLs, and sections do not match: '
                + ', '.join(f'{k}={v}' for k, v in counts.items())
            )
        return roster

    def load_profiles(self, prefix: str = DEFAULT_PROFILE_PREFIX) -> list[tuple[str, str]]:
        """Return (roll, username) for every roll with a LeetCode profile.

        Reads only the roll and URL files, so a short name, section or day
        file does not block the recent-submission feed.
        """
        rolls = read_lines(self.roll_path)
        urls = read_lines(self.url_path)
        if len(rolls) != len(urls):
            logger.warning(
                f"Roll file has {len(rolls)} entries but URL file has {len(urls)}; "
                f"unmatched lines skipped"
            )
        profiles = []
        for roll, url in zip(rolls, urls):
            username = parse_profile_url(url, prefix)
            if username:
                profiles.append((roll, username))
        return profiles
