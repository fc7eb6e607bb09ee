"""
Catalog Query Engine
Field-scoped filtering over the catalog with limit truncation.
Results keep catalog order; there is no relevance ranking.
"""

from dataclasses import dataclass, fields
from typing import Iterable, List, Optional, Union

from .catalog import Catalog, Component, Element, Layer, Zone

DEFAULT_LIMIT = 10


@dataclass
class SearchCriteria:
    """All-optional search filters, combined with AND"""
    query: Optional[str] = None                  # substring of name, description or any tag
    layer: Optional[Union[Layer, str]] = None    # elements only
    category: Optional[str] = None
    zone: Optional[str] = None                   # components only
    tags: Optional[List[str]] = None             # at least one must be present
    is_interactive: Optional[bool] = None        # components only
    limit: int = DEFAULT_LIMIT

    @classmethod
    def from_dict(cls, data: dict) -> "SearchCriteria":
        """Build criteria from a mapping, ignoring unrecognized and None values"""
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known and v is not None})


CriteriaLike = Union[SearchCriteria, dict, None]


def _as_criteria(criteria: CriteriaLike) -> SearchCriteria:
    if criteria is None:
        return SearchCriteria()
    if isinstance(criteria, SearchCriteria):
        return criteria
    return SearchCriteria.from_dict(criteria)


def _text_matches(query: Optional[str], name: str, description: str, tags: Iterable[str]) -> bool:
    if not query:
        return True
    needle = query.lower()
    if needle in name.lower() or needle in description.lower():
        return True
    return any(needle in tag.lower() for tag in tags)


def _tags_match(wanted: Optional[List[str]], tags: Iterable[str]) -> bool:
    if not wanted:
        return True
    wanted_lower = {t.lower() for t in wanted}
    return any(tag.lower() in wanted_lower for tag in tags)


class QueryEngine:
    """Deterministic search over an injected catalog"""

    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    def search(self, criteria: CriteriaLike = None) -> List[Element]:
        """
        Search the element collection.

        Args:
            criteria: SearchCriteria or a mapping of its fields

        Returns:
            Matching elements in catalog order, at most criteria.limit
        """
        criteria = _as_criteria(criteria)
        if criteria.limit <= 0:
            return []

        layer = None
        if criteria.layer is not None:
            layer = Layer.parse(criteria.layer)
            if layer is None:
                return []

        results = []
        for elem in self.catalog.all_elements():
            if layer is not None and elem.layer != layer:
                continue
            if criteria.category and elem.category != criteria.category:
                continue
            if not _tags_match(criteria.tags, elem.tags):
                continue
            if not _text_matches(criteria.query, elem.name, elem.description, elem.tags):
                continue
            results.append(elem)
            if len(results) >= criteria.limit:
                break
        return results

    def search_components(self, criteria: CriteriaLike = None) -> List[Component]:
        """Search the component collection with the same semantics as search()"""
        criteria = _as_criteria(criteria)
        if criteria.limit <= 0:
            return []

        results = []
        for comp in self.catalog.all_components():
            if criteria.zone and comp.zone != criteria.zone:
                continue
            if criteria.category and criteria.category not in comp.categories:
                continue
            if criteria.is_interactive is not None and comp.is_interactive != criteria.is_interactive:
                continue
            if not _tags_match(criteria.tags, comp.tags):
                continue
            if not _text_matches(criteria.query, comp.name, comp.description, comp.tags):
                continue
            results.append(comp)
            if len(results) >= criteria.limit:
                break
        return results

    def similar_components(self, component_id: str, limit: int = 5) -> List[Component]:
        """
        Components related to the given one.

        Scoring: +2 same zone, +3 per shared category, +2 per shared tag.
        Zero scores are dropped; ties keep catalog order.
        """
        target = self.catalog.component(component_id)
        if target is None or limit <= 0:
            return []

        target_categories = set(target.categories)
        target_tags = {t.lower() for t in target.tags}

        scored = []
        for comp in self.catalog.all_components():
            if comp.id == target.id:
                continue
            score = 0
            if comp.zone == target.zone:
                score += 2
            score += 3 * len(target_categories & set(comp.categories))
            score += 2 * len(target_tags & {t.lower() for t in comp.tags})
            if score > 0:
                scored.append((score, comp))

        # list.sort is stable, so equal scores stay in catalog order
        scored.sort(key=lambda pair: pair[0], reverse=True)
        return [comp for _, comp in scored[:limit]]

    def completions(self, partial: str, limit: int = 5) -> List[str]:
        """Autocomplete from component names, then tags, then categories"""
        if not partial or len(partial.strip()) < 2 or limit <= 0:
            return []
        needle = partial.strip().lower()

        components = self.catalog.all_components()
        candidates = [c.name for c in components]
        candidates += [t for c in components for t in c.tags]
        candidates += [cat for c in components for cat in c.categories]

        results: List[str] = []
        for candidate in candidates:
            if needle in candidate.lower() and candidate not in results:
                results.append(candidate)
                if len(results) >= limit:
                    break
        return results

    def zones_matching(self, text: str) -> List[Zone]:
        """Zones whose name, aesthetic or any tag contains the text"""
        needle = (text or "").lower()
        return [
            zone for zone in self.catalog.all_zones()
            if needle in zone.name.lower()
            or needle in zone.aesthetic.lower()
            or any(needle in tag.lower() for tag in zone.tags)
        ]

    def first_zone_matching(self, text: str) -> Optional[Zone]:
        matches = self.zones_matching(text)
        return matches[0] if matches else None
