from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Mapping

from errors import QuestionsError

# Non-negative base-10 integer, optional leading "+", no whitespace or "_".
_INDEX_RE = re.compile(r"^\+?[0-9]+$")


@dataclass(frozen=True)
class Pagination:
    start: int
    end: int


def _parse_index(raw: str) -> int:
    if not raw:
        raise ValueError("cannot parse integer from empty string")
    if _INDEX_RE.fullmatch(raw) is None:
        raise ValueError(f"invalid digit found in {raw!r}")
    return int(raw)


def extract_pagination(params: Mapping[str, str]) -> Pagination:
    """
    Pull `start` and `end` out of the query mapping.

    Both keys are required. No check that start <= end or that the range fits
    the collection; callers slice against their own snapshot.
    """
    if "start" not in params or "end" not in params:
        raise QuestionsError.missing_parameters()
    try:
        start = _parse_index(params["start"])
        end = _parse_index(params["end"])
    except ValueError as e:
        raise QuestionsError.parse_error(e) from e
    return Pagination(start=start, end=end)
