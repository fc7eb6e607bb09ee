"""
Catalog Accessors
Read-only query surface over one catalog. Every method returns plain
JSON-ready dicts; absence is None or an empty list, never an exception.
"""

from dataclasses import asdict
from typing import Dict, List, Optional, Union

from .catalog import Catalog, Component, Element, Layer, Zone, get_catalog
from .query import QueryEngine, SearchCriteria
from .suggester import ComponentSuggester


def _element_dict(elem: Element) -> dict:
    data = asdict(elem)
    data["layer"] = elem.layer.value
    return data


def _component_dict(comp: Component) -> dict:
    return asdict(comp)


def _entry_dict(entry: Union[Component, Element]) -> dict:
    if isinstance(entry, Element):
        return _element_dict(entry)
    return _component_dict(entry)


class CatalogAccessors:
    """Catalog, query engine and suggester wired to one catalog"""

    def __init__(self, catalog: Catalog):
        self.catalog = catalog
        self.engine = QueryEngine(catalog)
        self.suggester = ComponentSuggester(self.engine)

    # ------------------------------------------------------------
    # Search
    # ------------------------------------------------------------

    def search_elements(self, **criteria) -> List[dict]:
        """Search elements by query, layer, category, tags and limit"""
        results = self.engine.search(SearchCriteria.from_dict(criteria))
        return [_element_dict(e) for e in results]

    def search_components(self, **criteria) -> List[dict]:
        """Search components by query, zone, category, tags, is_interactive and limit"""
        results = self.engine.search_components(SearchCriteria.from_dict(criteria))
        return [_component_dict(c) for c in results]

    def similar_components(self, component_id: str, limit: int = 5) -> List[dict]:
        return [_component_dict(c) for c in self.engine.similar_components(component_id, limit)]

    def completions(self, partial: str, limit: int = 5) -> List[str]:
        return self.engine.completions(partial, limit)

    def suggest_components(
        self,
        description: str,
        aesthetic: Optional[str] = None,
        limit: Optional[int] = None
    ) -> dict:
        """
        Suggest elements for a description.

        Each suggestion is the element's fields plus "reason" and
        "suggested_zone".
        """
        result = self.suggester.suggest(description, aesthetic=aesthetic, limit=limit)
        return {
            "query": result.query,
            "aesthetic": result.aesthetic,
            "count": result.count,
            "suggestions": [
                {
                    **_element_dict(s.element),
                    "reason": s.reason,
                    "suggested_zone": s.suggested_zone,
                }
                for s in result.suggestions
            ],
        }

    # ------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------

    def get_by_id(self, entry_id: str) -> Optional[dict]:
        entry = self.catalog.by_id(entry_id)
        return _entry_dict(entry) if entry is not None else None

    def lookup(self, entry_id: str) -> Optional[dict]:
        """Tagged lookup: {"kind": "component" | "element", "entry": {...}}"""
        found = self.catalog.lookup(entry_id)
        if found is None:
            return None
        return {"kind": found.kind.value, "entry": _entry_dict(found.entry)}

    def get_element(self, element_id: str) -> Optional[dict]:
        elem = self.catalog.element(element_id)
        return _element_dict(elem) if elem else None

    def get_component(self, component_id: str) -> Optional[dict]:
        comp = self.catalog.component(component_id)
        return _component_dict(comp) if comp else None

    def get_element_composition(self, element_id: str) -> List[dict]:
        """Resolved constituent elements, in composed_of order"""
        elem = self.catalog.element(element_id)
        if elem is None:
            return []
        children = [self.catalog.element(child_id) for child_id in elem.composed_of]
        return [_element_dict(c) for c in children if c is not None]

    def get_element_usage(self, element_id: str) -> List[dict]:
        """Elements whose composition includes the given element"""
        return [
            _element_dict(e) for e in self.catalog.all_elements()
            if element_id in e.composed_of
        ]

    # ------------------------------------------------------------
    # Layers and categories
    # ------------------------------------------------------------

    def get_elements_by_layer(self, layer: Union[Layer, str]) -> List[dict]:
        return [_element_dict(e) for e in self.catalog.by_layer(layer)]

    def count_by_layer(self) -> Dict[str, int]:
        return {layer.value: len(self.catalog.by_layer(layer)) for layer in Layer}

    def get_categories(self) -> Dict[str, dict]:
        """Element categories in first-seen order: {category: {count, layer}}"""
        categories: Dict[str, dict] = {}
        for elem in self.catalog.all_elements():
            if elem.category not in categories:
                categories[elem.category] = {"count": 0, "layer": elem.layer.value}
            categories[elem.category]["count"] += 1
        return categories

    def get_category_details(self, layer: Union[Layer, str, None] = None) -> List[dict]:
        return [asdict(c) for c in self.catalog.element_categories(layer)]

    def get_component_categories(self) -> List[dict]:
        return [asdict(c) for c in self.catalog.component_categories()]

    # ------------------------------------------------------------
    # Themes
    # ------------------------------------------------------------

    def list_themes(self) -> List[dict]:
        return [asdict(t) for t in self.catalog.all_themes()]

    def get_theme_by_id(self, theme_id: str) -> Optional[dict]:
        theme = self.catalog.theme(theme_id)
        return asdict(theme) if theme else None

    # ------------------------------------------------------------
    # Zones
    # ------------------------------------------------------------

    def _zone_dict(self, zone: Zone) -> dict:
        data = asdict(zone)
        data["component_count"] = len(self.catalog.by_zone(zone.id))
        return data

    def list_zones(self) -> List[dict]:
        return [self._zone_dict(z) for z in self.catalog.all_zones()]

    def get_zone_by_id(self, zone_id: str) -> Optional[dict]:
        zone = self.catalog.zone(zone_id)
        return self._zone_dict(zone) if zone else None

    def search_zones(self, query: Optional[str] = None) -> List[dict]:
        """All zones without a query, otherwise name/aesthetic/tag substring matches"""
        if not query:
            return self.list_zones()
        return [self._zone_dict(z) for z in self.engine.zones_matching(query)]

    def get_components_by_zone(self, zone_id: str) -> List[dict]:
        return [_component_dict(c) for c in self.catalog.by_zone(zone_id)]

    def get_zone_components(
        self,
        zone_id: str,
        layer: Union[Layer, str, None] = None,
        limit: int = 20
    ) -> Optional[List[dict]]:
        """
        Elements that fit a zone's style, matched on its first two tags.

        Returns:
            Element dicts, or None for an unknown zone
        """
        zone = self.catalog.zone(zone_id)
        if zone is None:
            return None
        criteria = SearchCriteria(tags=zone.tags[:2], layer=layer, limit=limit)
        return [_element_dict(e) for e in self.engine.search(criteria)]

    # ------------------------------------------------------------
    # Summary
    # ------------------------------------------------------------

    def stats(self) -> dict:
        components = self.catalog.all_components()
        return {
            "components": len(components),
            "elements": len(self.catalog.all_elements()),
            "zones": len(self.catalog.all_zones()),
            "themes": len(self.catalog.all_themes()),
            "interactive_components": sum(1 for c in components if c.is_interactive),
            "elements_by_layer": self.count_by_layer(),
            "tags": sorted({t for c in components for t in c.tags}),
            "categories": sorted({cat for c in components for cat in c.categories}),
        }


# Singleton instance
_accessors: Optional[CatalogAccessors] = None


def get_accessors() -> CatalogAccessors:
    """Get or create accessors over the default catalog"""
    global _accessors
    if _accessors is None:
        _accessors = CatalogAccessors(get_catalog())
    return _accessors
