"""
Minute value intake.

Parses minute counts from command-line values or newline-separated files.
"""

import logging
import math
from pathlib import Path
from typing import Iterable, List

from .engagement import Engagement

logger = logging.getLogger(__name__)


def parse_minutes(values: Iterable[str]) -> List[float]:
    """Parse minute counts, skipping values that are not finite numbers.

    Args:
        values: Raw values, surrounding whitespace allowed

    Returns:
        Parsed minute counts in input order
    """
    minutes = []
    for value in values:
        try:
            parsed = float(value.strip())
        except ValueError:
            logger.warning("Unable to parse minutes from: %r", value)
            continue
        if not math.isfinite(parsed):
            logger.warning("Unable to parse minutes from: %r", value)
            continue
        minutes.append(parsed)
    return minutes


def read_minutes_file(path: str) -> List[float]:
    """Read minute counts from a file, one value per line.

    Args:
        path: Path to the input file

    Returns:
        Parsed minute counts in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    input_path = Path(path)
    if not input_path.is_file():
        raise FileNotFoundError(f"Minutes file not found: {path}")

    # Undecodable bytes become U+FFFD and fail to parse
    with open(input_path, 'r', encoding='utf-8', errors='replace') as f:
        lines = f.read().splitlines()

    return parse_minutes(lines)


def engagements_from_minutes(minutes: Iterable[float]) -> List[Engagement]:
    return [Engagement.from_minutes(value) for value in minutes]
