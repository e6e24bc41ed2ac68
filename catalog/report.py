"""Bucket distribution report for a `CourseTable`.

The table never rehashes, so this is the place to check whether the configured
size still suits the catalog being loaded.
"""

from __future__ import annotations

from collections import Counter

from .table import CourseTable


def build_distribution_report(table: CourseTable) -> dict:
    """Summarise chain lengths across every bucket of `table`."""
    lengths = table.chain_lengths()
    entries = sum(lengths)
    histogram = Counter(lengths)

    return {
        "table_size": table.table_size,
        "entries": entries,
        "load_factor": round(entries / table.table_size, 3),
        "used_buckets": sum(1 for length in lengths if length),
        "empty_buckets": histogram.get(0, 0),
        "longest_chain": max(lengths, default=0),
        "chain_lengths": dict(sorted(histogram.items())),
    }


def format_report(report: dict) -> str:
    lines = ["Bucket distribution:"]
    lines.append(f"Table size: {report['table_size']}")
    lines.append(f"Entries: {report['entries']} (load factor {report['load_factor']})")
    lines.append(f"Used buckets: {report['used_buckets']}, empty: {report['empty_buckets']}")
    lines.append(f"Longest chain: {report['longest_chain']}")
    for length, count in report["chain_lengths"].items():
        lines.append(f"  - chains of length {length}: {count}")
    return "\n".join(lines)
