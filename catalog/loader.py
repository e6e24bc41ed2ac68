"""Read course records from comma-delimited text into a `CourseTable`.

Each line is ``<number>,<title>[,<prerequisite>]*``. There is no header row and
no quoting, so titles cannot contain commas.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from .record import Course
from .table import CourseTable

LOGGER = logging.getLogger(__name__)


class CatalogLoader:
    """Parses catalog lines and feeds them to a table one record at a time."""

    def __init__(self, *, delimiter: str = ",", encoding: str = "utf-8-sig") -> None:
        self.delimiter = delimiter
        self.encoding = encoding

    def parse_line(self, line: str) -> Optional[Course]:
        """Turn one line into a `Course`; blank or keyless lines give `None`.

        Missing fields degrade to an empty title and no prerequisites.
        """
        text = line.strip()
        if not text:
            return None

        fields = [field.strip() for field in text.split(self.delimiter)]
        number = fields[0]
        if not number:
            LOGGER.warning("Skipping line without a course number: %r", line)
            return None

        if len(fields) < 2:
            LOGGER.debug("Line for %s has no title", number)
        title = fields[1] if len(fields) > 1 else ""
        prerequisites = [field for field in fields[2:] if field]

        return Course(number=number, title=title, prerequisites=prerequisites)

    def load_lines(self, lines: Iterable[str], table: CourseTable) -> int:
        loaded = 0
        for line in lines:
            course = self.parse_line(line)
            if course is None:
                continue
            table.insert(course)
            loaded += 1
        return loaded

    def load(self, file_path: Path | str, table: CourseTable) -> int:
        """Insert every record in `file_path` and return how many were read.

        The whole file is decoded before anything is inserted, so a file that
        fails to decode leaves `table` untouched.
        """
        path = Path(file_path)
        if not path.is_file():
            raise FileNotFoundError(f"Course file not found: {path}")

        try:
            text = path.read_text(encoding=self.encoding)
        except UnicodeDecodeError as exc:
            raise ValueError(f"Could not decode {path} as {self.encoding}: {exc}") from exc

        loaded = self.load_lines(text.splitlines(), table)

        LOGGER.info("Loaded %d course record(s) from %s", loaded, path)
        return loaded
