"""
Configuration data models for kniferoll.

These models define the structure of .kniferoll.json and
~/.config/kniferoll/config.json files, with validation via Pydantic.
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SuggestionConfig(BaseModel):
    """
    Suggestion ranking settings.

    Controls how many suggestions are shown and where the frequency
    share of the score saturates.
    """
    limit: Optional[int] = Field(
        default=3,
        ge=1,
        description="Number of suggestions to display (null shows all)"
    )
    max_use_count: int = Field(
        default=50,
        ge=1,
        description="Use count at which the frequency share of the score saturates"
    )
    search_limit: int = Field(
        default=10,
        ge=1,
        description="Maximum autocomplete matches returned for a text query"
    )


class StoreConfig(BaseModel):
    """
    Suggestion storage settings.

    Relative paths are resolved against the project root.
    """
    path: str = Field(
        default=".kniferoll/suggestions.jsonl",
        min_length=1,
        description="JSON-lines file holding suggestion candidates"
    )
    kitchen_id: Optional[str] = Field(
        default=None,
        description="Kitchen id stamped on newly recorded suggestions"
    )


class KnifeRollConfig(BaseModel):
    """
    Top-level kniferoll configuration.

    Loaded from defaults, user config, project config, and env vars.

    Example:
        >>> config = KnifeRollConfig(
        ...     suggestions=SuggestionConfig(limit=5),
        ...     store=StoreConfig(path="data/suggestions.jsonl"),
        ... )
        >>> config.suggestions.limit
        5
    """
    suggestions: SuggestionConfig = Field(
        default_factory=SuggestionConfig,
        description="Suggestion ranking settings"
    )
    store: StoreConfig = Field(
        default_factory=StoreConfig,
        description="Suggestion storage settings"
    )

    model_config = ConfigDict(
        extra="allow",  # Allow extra fields for forward compatibility
        validate_assignment=True,
    )

    @field_validator('store', mode='before')
    @classmethod
    def validate_store(cls, v: Union[str, dict, StoreConfig]) -> Union[dict, StoreConfig]:
        """Convert a bare store path string to StoreConfig."""
        if isinstance(v, str):
            return {"path": v}
        return v
