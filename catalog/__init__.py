"""In-memory course catalog backed by a separately chained hash table."""

from .hashing import DEFAULT_TABLE_SIZE, char_sum_hash
from .loader import CatalogLoader
from .record import Course
from .report import build_distribution_report, format_report
from .shell import CatalogShell, Command, ShellResult, dispatch, parse_command
from .table import CourseTable

__all__ = [
    "DEFAULT_TABLE_SIZE",
    "char_sum_hash",
    "CatalogLoader",
    "Course",
    "build_distribution_report",
    "format_report",
    "CatalogShell",
    "Command",
    "ShellResult",
    "dispatch",
    "parse_command",
    "CourseTable",
]
