"""
Component Suggester
===================

Suggests catalog elements for a free-text description of a page or feature.

Features:
- Intent buckets (landing, pricing, form, ...) fired by keyword substrings
- Bounded facet queries per bucket, each hit tagged with a reason
- Free-text fallback when no bucket fires
- Zone annotation from an optional aesthetic
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from .catalog import Element
from .query import QueryEngine, SearchCriteria

DEFAULT_SUGGESTION_LIMIT = 10
FALLBACK_REASON = "Matches your description"


@dataclass
class IntentBucket:
    """Keyword set plus the bounded queries it issues when it fires"""
    name: str
    keywords: Tuple[str, ...]
    queries: Tuple[Tuple[SearchCriteria, str], ...]   # (criteria, reason)

    def fires(self, description_lower: str) -> bool:
        return any(kw in description_lower for kw in self.keywords)


@dataclass
class Suggestion:
    element: Element
    reason: str
    suggested_zone: Optional[str] = None   # zone name from the aesthetic


@dataclass
class SuggestionResult:
    query: str
    aesthetic: Optional[str]
    count: int
    suggestions: List[Suggestion] = field(default_factory=list)


# Evaluated in order; several buckets may fire for one description
INTENT_BUCKETS: Tuple[IntentBucket, ...] = (
    IntentBucket(
        name="landing",
        keywords=("landing", "homepage", "marketing"),
        queries=(
            (SearchCriteria(tags=["hero"], limit=2), "Hero section for landing pages"),
            (SearchCriteria(tags=["features"], limit=2), "Feature showcase section"),
            (SearchCriteria(tags=["cta"], limit=2), "Call-to-action for conversions"),
        ),
    ),
    IntentBucket(
        name="pricing",
        keywords=("pricing", "plans", "subscription"),
        queries=(
            (SearchCriteria(tags=["pricing"], limit=3), "Pricing table/cards"),
        ),
    ),
    IntentBucket(
        name="form",
        keywords=("form", "login", "signup", "auth"),
        queries=(
            (SearchCriteria(category="inputs", limit=4), "Form input component"),
            (SearchCriteria(tags=["button"], limit=2), "Action button"),
        ),
    ),
    IntentBucket(
        name="navigation",
        keywords=("navigation", "nav", "header", "footer"),
        queries=(
            (SearchCriteria(category="navigation", limit=3), "Navigation component"),
        ),
    ),
    IntentBucket(
        name="cards",
        keywords=("card", "grid", "list"),
        queries=(
            (SearchCriteria(category="cards", limit=3), "Card component for content display"),
        ),
    ),
    IntentBucket(
        name="testimonials",
        keywords=("testimonial", "review", "social proof"),
        queries=(
            (SearchCriteria(tags=["testimonial"], limit=2), "Customer testimonials"),
        ),
    ),
)


class ComponentSuggester:
    """Maps a description to element suggestions through intent buckets"""

    def __init__(self, engine: QueryEngine, buckets: Sequence[IntentBucket] = INTENT_BUCKETS):
        self.engine = engine
        self.buckets = tuple(buckets)

    def matching_buckets(self, description: str) -> List[IntentBucket]:
        """Buckets whose keywords appear in the description"""
        lowered = (description or "").lower()
        return [bucket for bucket in self.buckets if bucket.fires(lowered)]

    def suggest(
        self,
        description: str,
        aesthetic: Optional[str] = None,
        limit: Optional[int] = None
    ) -> SuggestionResult:
        """
        Build suggestions for a description.

        Args:
            description: Free-text description of what is being built
            aesthetic: Optional style hint used to pick a zone
            limit: Maximum number of suggestions (default 10)

        Returns:
            SuggestionResult; empty when nothing matches
        """
        if limit is None:
            limit = DEFAULT_SUGGESTION_LIMIT

        suggestions: List[Suggestion] = []
        if description and description.strip():
            fired = self.matching_buckets(description)
            for bucket in fired:
                for criteria, reason in bucket.queries:
                    for elem in self.engine.search(criteria):
                        suggestions.append(Suggestion(element=elem, reason=reason))

            if not fired:
                fallback = SearchCriteria(query=description, limit=limit)
                for elem in self.engine.search(fallback):
                    suggestions.append(Suggestion(element=elem, reason=FALLBACK_REASON))

        suggestions = suggestions[:max(limit, 0)]

        if aesthetic:
            zone = self.engine.first_zone_matching(aesthetic)
            if zone is not None:
                for suggestion in suggestions:
                    suggestion.suggested_zone = zone.name

        return SuggestionResult(
            query=description,
            aesthetic=aesthetic,
            count=len(suggestions),
            suggestions=suggestions,
        )
