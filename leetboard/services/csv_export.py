from __future__ import annotations

import csv
import io
import json


def _cell(value):
    if isinstance(value, (list, dict)):
        return json.dumps(value, ensure_ascii=False, separators=(',', ':'))
    if value is None:
        return ''
    return value


def records_to_csv(records: list[dict]) -> str:
    """Flatten leaderboard records into CSV text.

    Columns are the union of top-level keys in first-seen order, so records
    with and without LeetCode data share one header. Nested values such as
    ``recentSubmissions`` are written as compact JSON.
    """
    if not records:
        return ''

    columns = []
    for record in records:
        for key in record:
            if key not in columns:
                columns.append(key)

    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=columns, restval='', lineterminator='\n')
    writer.writeheader()
    for record in records:
        writer.writerow({k: _cell(v) for k, v in record.items()})
    return buf.getvalue()
