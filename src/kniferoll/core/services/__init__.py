"""
Service layer for kniferoll.

Services are stateless orchestrators that compose domain operations into clean
API surfaces. Any interface (CLI, API, UI hooks) calls service methods
instead of reaching into core packages directly.

Design principles:
- Methods accept typed inputs, return typed outputs, raise typed exceptions.
- No Rich, no sys.exit, no print statements; presentation belongs to the caller.
- Collaborators (config, storage) are passed in, never looked up globally.

Modules:
    suggestions: SuggestionService ranks and records prep-item suggestions.
"""

from kniferoll.core.services.suggestions import (
    SuggestionService,
    SuggestionServiceError,
)

__all__ = [
    "SuggestionService",
    "SuggestionServiceError",
]
