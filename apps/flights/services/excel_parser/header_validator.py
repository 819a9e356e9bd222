"""Validation of the workbook header row."""

import logging
from typing import Iterable, List

from .header_mapping import REQUIRED_HEADERS

logger = logging.getLogger(__name__)


def find_missing_headers(header_row: Iterable) -> List[str]:
    """
    Return the required headers absent from the header row.

    Header cells are compared by exact text; their order in the sheet does
    not matter. The result keeps the order of REQUIRED_HEADERS.
    """
    present = {cell for cell in header_row if isinstance(cell, str)}
    missing = [header for header in REQUIRED_HEADERS if header not in present]

    if missing:
        logger.warning(f"[find_missing_headers] Missing headers: {missing} (found: {sorted(present)})")
    return missing
