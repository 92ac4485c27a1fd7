"""Run a single leaderboard refresh outside the scheduler.

Useful after editing the roster files, or to inspect the merged board
without waiting for the next hourly tick.

Usage:
    python scripts/refresh_once.py              # refresh and save data.json
    python scripts/refresh_once.py --feed       # print the recent-submission feed
"""
import argparse
import logging
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), '..'))

from leetboard import create_app
from leetboard.services.refresh_service import RefreshService


def refresh():
    service = RefreshService.from_config(create_app().config)
    if not service.refresh():
        print("Refresh failed, snapshot left unchanged (see log).")
        return 1
    print(f"Snapshot written to {service.store.path}")
    return 0


def show_feed():
    service = RefreshService.from_config(create_app().config)
    feed = service.recent_submissions()
    if not feed:
        print("No recent submissions found.")
        return 0
    for item in feed:
        print(f"{item['timestamp']}  {item['username']:<20} {item['title']}")
    return 0


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument('--feed', action='store_true',
                        help='Print recent accepted submissions instead of refreshing')
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format='%(asctime)s [%(levelname)s] %(name)s: %(message)s')
    sys.exit(show_feed() if args.feed else refresh())
