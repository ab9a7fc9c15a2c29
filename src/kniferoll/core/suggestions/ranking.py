"""
Ranking algorithm for prep-item suggestions.

Scores previously-used items by a blend of frequency and recency:
- Recency score from whole calendar days since last use
- Frequency share of use_count against a normalization ceiling
- Weighted score = frequency * 0.4 + recency * 0.6

Items the user dismissed, or that are already on today's list, are removed
before scoring.
"""

import logging
import re
from collections.abc import Iterable, Mapping
from datetime import date, datetime
from typing import Any

from kniferoll.core.suggestions.models import (
    Candidate,
    CurrentItem,
    LastUsed,
    RankedCandidate,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_USE_COUNT = 50
FREQUENCY_WEIGHT = 0.4
RECENCY_WEIGHT = 0.6

# Recency bands, evaluated in order
RECENCY_TODAY = 1.0
RECENCY_YESTERDAY = 0.8
RECENCY_THIS_WEEK = 0.5
RECENCY_OLDER = 0.2

# Both spellings, since camelCase keys arrive as extras on raw records
_SCORE_FIELDS = {"recency_score", "weighted_score", "recencyScore", "weightedScore", "dismissed"}

_FRACTION = re.compile(r"\.(\d+)")
_SHORT_OFFSET = re.compile(r"([+-]\d{2})$")


def calculate_recency_score(last_used: LastUsed, today: date | None = None) -> float:
    """Calculate recency score based on when the item was last used.

    Bands:
    - never used / unknown: 0.2
    - today: 1.0
    - yesterday: 0.8
    - within the last 7 days: 0.5
    - older: 0.2

    Args:
        last_used: Calendar date string, ISO timestamp, date, or None
        today: Reference date (defaults to the local current date)

    Returns:
        One of 1.0, 0.8, 0.5, 0.2
    """
    used_on = parse_calendar_date(last_used)
    if used_on is None:
        return RECENCY_OLDER

    if today is None:
        today = date.today()

    days = (today - used_on).days

    if days == 0:
        return RECENCY_TODAY
    if days == 1:
        return RECENCY_YESTERDAY
    # Future dates land here too (negative days)
    if days <= 7:
        return RECENCY_THIS_WEEK
    return RECENCY_OLDER


def calculate_weighted_score(
    use_count: int | None,
    recency_score: float,
    max_use_count: int = DEFAULT_MAX_USE_COUNT,
) -> float:
    """Calculate weighted score for a suggestion.

    Score = min(use_count / max_use_count, 1.0) * 0.4 + recency_score * 0.6

    Capping the frequency share keeps a single outlier count from
    dominating the ordering.

    Args:
        use_count: Historical use count (None counts as 0)
        recency_score: Score from calculate_recency_score
        max_use_count: Count at which the frequency share saturates

    Returns:
        Weighted score (0.0 to 1.0 for valid inputs)
    """
    normalized_use_count = min((use_count or 0) / max_use_count, 1.0)
    return normalized_use_count * FREQUENCY_WEIGHT + recency_score * RECENCY_WEIGHT


def rank_suggestions(
    candidates: Iterable[Candidate | Mapping[str, Any]],
    dismissed_ids: Iterable[str] = (),
    current_items: Iterable[CurrentItem | Mapping[str, Any] | str] = (),
    top_n: int | None = 3,
    *,
    max_use_count: int = DEFAULT_MAX_USE_COUNT,
    today: date | None = None,
) -> list[RankedCandidate]:
    """Score and rank suggestions, returning the top N that survive filtering.

    Candidates whose id is dismissed, or whose description already appears
    on the current list (case-insensitive), are dropped. Survivors are
    sorted by weighted score, highest first; ties keep their input order.

    The frequency ceiling is the larger of ``max_use_count`` and the
    biggest use_count in the batch.

    Args:
        candidates: Candidate models or raw records
        dismissed_ids: Ids the user hid during this session
        current_items: Items already on today's list (models, records or strings)
        top_n: Maximum results to return (None = all)
        max_use_count: Minimum frequency ceiling
        today: Reference date for recency (defaults to local today)

    Returns:
        Ranked candidates with scores attached
    """
    pool = [_coerce_candidate(c) for c in candidates]
    if not pool:
        return []

    dismissed = set(dismissed_ids)
    current = {_current_description(item) for item in current_items}

    ceiling = max([max_use_count, *(c.use_count or 0 for c in pool)]) or DEFAULT_MAX_USE_COUNT
    if today is None:
        today = date.today()

    scored: list[RankedCandidate] = []
    for candidate in pool:
        if candidate.id in dismissed:
            continue
        if candidate.normalized_description in current:
            continue

        recency_score = calculate_recency_score(candidate.last_used, today=today)
        weighted_score = calculate_weighted_score(
            candidate.use_count, recency_score, ceiling
        )
        record = {
            k: v for k, v in candidate.model_dump().items() if k not in _SCORE_FIELDS
        }
        scored.append(
            RankedCandidate(
                **record,
                recency_score=recency_score,
                weighted_score=weighted_score,
                dismissed=False,
            )
        )

    # sort() is stable, including with reverse=True
    scored.sort(key=lambda c: c.weighted_score, reverse=True)

    logger.debug(
        "Ranked %d of %d candidates (ceiling=%d, top_n=%s)",
        len(scored),
        len(pool),
        ceiling,
        top_n,
    )

    if top_n is not None:
        return scored[:top_n]
    return scored


def filter_by_query(ranked: list[RankedCandidate], query: str | None) -> list[RankedCandidate]:
    """Narrow a ranked list to descriptions containing the query text.

    Matching is case-insensitive; a blank query returns the list unchanged.
    """
    if not query or not query.strip():
        return list(ranked)
    needle = query.strip().casefold()
    return [c for c in ranked if needle in (c.description or "").casefold()]


def parse_calendar_date(value: LastUsed) -> date | None:
    """Reduce a last_used value to its calendar date.

    Accepts ``YYYY-MM-DD`` strings, ISO timestamps (with or without offset,
    including a trailing ``Z``), ``date`` and ``datetime`` objects. Aware
    timestamps are converted to local time first so a late-evening UTC
    timestamp lands on the local calendar day.

    Returns:
        The calendar date, or None if the value is empty or unparseable
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return _local_date(value)
    if isinstance(value, date):
        return value

    text = str(value).strip()
    if not text:
        return None

    try:
        if len(text) == 10:
            return date.fromisoformat(text)
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        # fromisoformat on 3.10 wants 6 fraction digits and a full offset
        text = _FRACTION.sub(lambda m: "." + m.group(1).ljust(6, "0")[:6], text, count=1)
        text = _SHORT_OFFSET.sub(r"\1:00", text)
        return _local_date(datetime.fromisoformat(text))
    except ValueError:
        logger.debug("Unparseable last_used value %r, treating as unknown", value)
        return None


def _local_date(moment: datetime) -> date:
    if moment.tzinfo is not None:
        moment = moment.astimezone()
    return moment.date()


def _coerce_candidate(candidate: Candidate | Mapping[str, Any]) -> Candidate:
    if isinstance(candidate, Candidate):
        return candidate
    return Candidate.model_validate(dict(candidate))


def is_already_listed(
    description: str | None,
    current_items: Iterable[CurrentItem | Mapping[str, Any] | str],
) -> bool:
    """Check whether a description is already on the current list.

    Comparison ignores case and surrounding whitespace.
    """
    needle = (description or "").strip().casefold()
    return any(_current_description(item) == needle for item in current_items)


def _current_description(item: CurrentItem | Mapping[str, Any] | str) -> str:
    if isinstance(item, str):
        return item.strip().casefold()
    if isinstance(item, CurrentItem):
        return item.normalized_description
    return (item.get("description") or "").strip().casefold()
