"""
Kniferoll - prep-list item suggestions.

Ranks previously-used prep items by how recently and how often they were
used, for the prep-list autocomplete.
"""

__version__ = "0.1.0"

# Re-export core models for convenience
from kniferoll.core.suggestions.models import Candidate, RankedCandidate
from kniferoll.core.suggestions.ranking import rank_suggestions

__all__ = ["Candidate", "RankedCandidate", "rank_suggestions", "__version__"]
