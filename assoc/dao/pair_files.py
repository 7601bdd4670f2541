"""CSV storage for association lists.

A pair file has one ``key,value`` row per pair. Blank lines are skipped;
any other row must have exactly two columns. Keys and values are strings.
"""

from __future__ import annotations

import csv
import logging
from typing import List, Optional, Tuple

from .. import config
from ..datastructures import AssocList
from ..errors import PairFileError

logger = logging.getLogger(__name__)


def load_pairs(path: str, delimiter: Optional[str] = None) -> AssocList[str, str]:
    """Read `path` into an association list, keeping row order.

    Raises
    ------
    PairFileError
        If a non-blank row does not have exactly two columns.
    OSError
        If the file cannot be opened.
    """
    delimiter = delimiter or config.CSV_DELIMITER
    pairs: List[Tuple[str, str]] = []
    with open(path, "r", newline="", encoding="utf-8") as f:
        reader = csv.reader(f, delimiter=delimiter)
        for row in reader:
            if not row:
                continue
            if len(row) != 2:
                raise PairFileError(path, reader.line_num, f"expected 2 columns, got {len(row)}")
            pairs.append((row[0], row[1]))
    logger.info("loaded %d pairs from %s", len(pairs), path)
    return AssocList.from_pairs(pairs)


def save_pairs(path: str, al: AssocList[str, str], delimiter: Optional[str] = None) -> int:
    """Write `al` to `path` in link order and return the number of rows written."""
    delimiter = delimiter or config.CSV_DELIMITER
    count = 0
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f, delimiter=delimiter)
        for key, value in al:
            writer.writerow([key, value])
            count += 1
    logger.info("saved %d pairs to %s", count, path)
    return count
