"""
Data models for the suggestion system.

Defines the candidate records fed into the ranker, the ranked records it
returns, and the current prep-list items used to suppress duplicates.
"""

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Candidate(BaseModel):
    """A previously-used prep item that may be suggested again.

    Candidates are loaded fresh for every ranking call. Fields mirror the
    stored suggestion record; nullable counters and dates are accepted as-is
    and coerced to neutral values by the scorers, not here.

    Example:
        >>> candidate = Candidate(
        ...     id="s-1",
        ...     description="Brunoise shallots",
        ...     use_count=12,
        ...     last_used="2024-06-14",
        ... )
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="allow",
    )

    id: str = Field(..., description="Opaque unique identifier")
    description: str | None = Field(
        default=None,
        description="Free-text item name (None compares as empty string)"
    )
    use_count: int | None = Field(
        default=None,
        description="Historical use count (None counts as 0, negatives are not rejected)"
    )
    last_used: str | None = Field(
        default=None,
        description="Calendar date (YYYY-MM-DD) or ISO timestamp of the latest use"
    )

    # Pass-through fields from the stored record
    kitchen_id: str | None = Field(default=None, description="Owning kitchen")
    default_unit_id: str | None = Field(
        default=None,
        description="Unit used the last time this item was added"
    )
    last_quantity_used: float | None = Field(
        default=None,
        description="Quantity used the last time this item was added"
    )
    created_at: str | None = Field(default=None, description="When the record was created")

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        """Accept numeric ids from loosely-typed sources."""
        if isinstance(v, int):
            return str(v)
        return v

    @property
    def normalized_description(self) -> str:
        """Description prepared for case-insensitive comparison."""
        return (self.description or "").strip().casefold()


class RankedCandidate(Candidate):
    """A candidate with its ranking scores attached.

    Serializes the score fields under their camelCase aliases
    (``recencyScore``, ``weightedScore``) so downstream consumers see the
    same keys regardless of which side produced the list.
    """

    recency_score: float = Field(
        ...,
        alias="recencyScore",
        description="Freshness signal derived from last_used (0.2-1.0)"
    )
    weighted_score: float = Field(
        ...,
        alias="weightedScore",
        description="Blended frequency and recency ranking key (0.0-1.0)"
    )
    dismissed: bool = Field(
        default=False,
        description="Always False in ranker output; kept for display consistency"
    )


class CurrentItem(BaseModel):
    """An item already on today's prep list.

    Only the description takes part in duplicate suppression.
    """

    model_config = ConfigDict(extra="allow")

    id: str | None = None
    description: str | None = None

    @property
    def normalized_description(self) -> str:
        return (self.description or "").strip().casefold()


LastUsed = str | date | datetime | None
