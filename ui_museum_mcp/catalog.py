"""
UI Museum Catalog
=================

Immutable in-memory catalog of zone components and atomic-design elements.

Features:
- Typed records for components, elements, zones and themes
- Lookup maps (by id, layer, category, zone) built once at construction
- Load-time validation of catalog invariants
- Lazily built process-wide default catalog
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple, Union

from . import catalog_data

logger = logging.getLogger(__name__)

EXPECTED_THEME_COUNT = 6


class CatalogError(ValueError):
    """Catalog records break a load-time invariant"""


# ============================================================
# Record Types
# ============================================================

class Layer(str, Enum):
    """Atomic-design layer of an element"""
    ATOM = "atom"
    MOLECULE = "molecule"
    ORGANISM = "organism"
    TEMPLATE = "template"

    @classmethod
    def parse(cls, value: Union["Layer", str, None]) -> Optional["Layer"]:
        """Resolve a layer name case-insensitively, None when unknown"""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class EntryKind(str, Enum):
    COMPONENT = "component"
    ELEMENT = "element"


def _freeze_sequences(record, *names):
    # frozen records hold tuples so list fields cannot be edited in place
    for name in names:
        object.__setattr__(record, name, tuple(getattr(record, name)))


@dataclass(frozen=True)
class Zone:
    """Themed gallery that groups components"""
    id: str
    name: str
    description: str
    aesthetic: str
    tags: Tuple[str, ...] = ()
    colors: Dict[str, str] = field(default_factory=dict)

    def __post_init__(self):
        _freeze_sequences(self, "tags")


@dataclass(frozen=True)
class Theme:
    """Color palette applied across the catalog"""
    id: str
    name: str
    description: str
    colors: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Component:
    """Zone-scoped gallery entry"""
    id: str
    name: str
    description: str
    zone: str
    categories: Tuple[str, ...]
    tags: Tuple[str, ...] = ()
    is_interactive: bool = False
    source_project: str = ""         # display metadata, opaque here
    source_file: str = ""
    preview_size: str = "medium"     # small / medium / large / fullscreen

    def __post_init__(self):
        _freeze_sequences(self, "categories", "tags")


@dataclass(frozen=True)
class Slot:
    """Content slot an organism or template exposes"""
    id: str
    name: str
    type: str                        # text, image, action, list
    required: bool = False
    description: str = ""


@dataclass(frozen=True)
class Element:
    """Atomic-design entry"""
    id: str
    name: str
    description: str
    layer: Layer
    category: str
    tags: Tuple[str, ...] = ()
    composed_of: Tuple[str, ...] = ()   # ids of constituent elements
    variants: Tuple[str, ...] = ()
    slots: Tuple[Slot, ...] = ()
    theme_agnostic: bool = False

    def __post_init__(self):
        _freeze_sequences(self, "tags", "composed_of", "variants", "slots")

    @classmethod
    def from_dict(cls, data: dict) -> "Element":
        layer = Layer.parse(data.get("layer"))
        if layer is None:
            raise CatalogError(f"Element {data.get('id')!r} has invalid layer: {data.get('layer')!r}")
        slots = [s if isinstance(s, Slot) else Slot(**s) for s in data.get("slots", [])]
        return cls(**{**data, "layer": layer, "slots": slots})


@dataclass
class CategoryInfo:
    """Category metadata with the live number of entries using it"""
    id: str
    name: str
    description: str
    icon: str
    layer: Optional[str] = None      # None for the component namespace
    count: int = 0


@dataclass
class Found:
    """Tagged by-id lookup result"""
    kind: EntryKind
    entry: Union[Component, Element]


# ============================================================
# Catalog
# ============================================================

class Catalog:
    """Read-only catalog with lookup maps precomputed at construction"""

    def __init__(
        self,
        components: Iterable[Component],
        elements: Iterable[Element],
        zones: Iterable[Zone],
        themes: Iterable[Theme],
        element_categories: Iterable[dict] = (),
        component_categories: Iterable[dict] = (),
    ):
        self._components: Tuple[Component, ...] = tuple(components)
        self._elements: Tuple[Element, ...] = tuple(elements)
        self._zones: Tuple[Zone, ...] = tuple(zones)
        self._themes: Tuple[Theme, ...] = tuple(themes)
        self._element_category_meta: Dict[str, dict] = {c["id"]: dict(c) for c in element_categories}
        self._component_category_meta: Dict[str, dict] = {c["id"]: dict(c) for c in component_categories}

        self._zone_by_id: Dict[str, Zone] = {z.id: z for z in self._zones}
        self._theme_by_id: Dict[str, Theme] = {t.id: t for t in self._themes}
        self._component_by_id: Dict[str, Component] = {}
        self._element_by_id: Dict[str, Element] = {}
        self._validate()

        self._elements_by_layer: Dict[Layer, Tuple[Element, ...]] = {
            layer: tuple(e for e in self._elements if e.layer == layer) for layer in Layer
        }
        self._elements_by_category = self._group(self._elements, lambda e: [e.category])
        self._components_by_category = self._group(self._components, lambda c: c.categories)
        self._components_by_zone = self._group(self._components, lambda c: [c.zone])

    @classmethod
    def from_records(
        cls,
        components: Iterable[dict],
        elements: Iterable[dict],
        zones: Iterable[dict],
        themes: Iterable[dict],
        element_categories: Iterable[dict] = (),
        component_categories: Iterable[dict] = (),
    ) -> "Catalog":
        """Build a catalog from plain dict records"""
        return cls(
            components=[Component(**c) for c in components],
            elements=[Element.from_dict(e) for e in elements],
            zones=[Zone(**z) for z in zones],
            themes=[Theme(**t) for t in themes],
            element_categories=element_categories,
            component_categories=component_categories,
        )

    def _validate(self):
        if len(self._zone_by_id) != len(self._zones):
            raise CatalogError("Duplicate zone id in catalog")

        for comp in self._components:
            if comp.id in self._component_by_id:
                raise CatalogError(f"Duplicate component id: {comp.id}")
            if comp.zone not in self._zone_by_id:
                raise CatalogError(f"Component {comp.id} references unknown zone: {comp.zone}")
            if not comp.categories:
                raise CatalogError(f"Component {comp.id} has no categories")
            self._component_by_id[comp.id] = comp

        for elem in self._elements:
            if not isinstance(elem.layer, Layer):
                raise CatalogError(f"Element {elem.id} has invalid layer: {elem.layer!r}")
            if elem.id in self._element_by_id:
                raise CatalogError(f"Duplicate element id: {elem.id}")
            if elem.id in self._component_by_id:
                raise CatalogError(f"Id shared by component and element: {elem.id}")
            self._element_by_id[elem.id] = elem

    @staticmethod
    def _group(entries, keys_of) -> Dict[str, tuple]:
        groups: Dict[str, list] = {}
        for entry in entries:
            for key in keys_of(entry):
                groups.setdefault(key, []).append(entry)
        return {k: tuple(v) for k, v in groups.items()}

    # Full collections

    def all_components(self) -> Tuple[Component, ...]:
        return self._components

    def all_elements(self) -> Tuple[Element, ...]:
        return self._elements

    def all_zones(self) -> Tuple[Zone, ...]:
        return self._zones

    def all_themes(self) -> Tuple[Theme, ...]:
        return self._themes

    # Single lookups

    def component(self, component_id: str) -> Optional[Component]:
        return self._component_by_id.get(component_id)

    def element(self, element_id: str) -> Optional[Element]:
        return self._element_by_id.get(element_id)

    def zone(self, zone_id: str) -> Optional[Zone]:
        return self._zone_by_id.get(zone_id)

    def theme(self, theme_id: str) -> Optional[Theme]:
        return self._theme_by_id.get(theme_id)

    def by_id(self, entry_id: str) -> Optional[Union[Component, Element]]:
        """Component first, then element; None when absent from both"""
        found = self.lookup(entry_id)
        return found.entry if found else None

    def lookup(self, entry_id: str) -> Optional[Found]:
        if entry_id in self._component_by_id:
            return Found(EntryKind.COMPONENT, self._component_by_id[entry_id])
        if entry_id in self._element_by_id:
            return Found(EntryKind.ELEMENT, self._element_by_id[entry_id])
        return None

    # Groupings

    def by_layer(self, layer: Union[Layer, str]) -> Tuple[Element, ...]:
        parsed = Layer.parse(layer)
        if parsed is None:
            return ()
        return self._elements_by_layer[parsed]

    def by_category(self, category_id: str) -> Union[Tuple[Element, ...], Tuple[Component, ...]]:
        """
        Entries of a category. Element categories take precedence when an id
        exists in both namespaces.
        """
        if category_id in self._elements_by_category or category_id in self._element_category_meta:
            return self.elements_by_category(category_id)
        return self.components_by_category(category_id)

    def elements_by_category(self, category_id: str) -> Tuple[Element, ...]:
        return self._elements_by_category.get(category_id, ())

    def components_by_category(self, category_id: str) -> Tuple[Component, ...]:
        return self._components_by_category.get(category_id, ())

    def by_zone(self, zone_id: str) -> Tuple[Component, ...]:
        return self._components_by_zone.get(zone_id, ())

    # Category metadata

    def element_categories(self, layer: Union[Layer, str, None] = None) -> List[CategoryInfo]:
        """Element categories with live counts, metadata order first"""
        wanted = None
        if layer is not None:
            wanted = Layer.parse(layer)
            if wanted is None:
                return []

        ids = list(self._element_category_meta)
        ids += [c for c in self._elements_by_category if c not in self._element_category_meta]

        result = []
        for cat_id in ids:
            members = self._elements_by_category.get(cat_id, ())
            meta = self._element_category_meta.get(cat_id, {})
            cat_layer = meta.get("layer") or (members[0].layer.value if members else None)
            if wanted is not None and cat_layer != wanted.value:
                continue
            result.append(CategoryInfo(
                id=cat_id,
                name=meta.get("name", cat_id.replace("-", " ").title()),
                description=meta.get("description", ""),
                icon=meta.get("icon", ""),
                layer=cat_layer,
                count=len(members),
            ))
        return result

    def component_categories(self) -> List[CategoryInfo]:
        """Component categories with live counts, metadata order first"""
        ids = list(self._component_category_meta)
        ids += [c for c in self._components_by_category if c not in self._component_category_meta]

        result = []
        for cat_id in ids:
            meta = self._component_category_meta.get(cat_id, {})
            result.append(CategoryInfo(
                id=cat_id,
                name=meta.get("name", cat_id.replace("-", " ").title()),
                description=meta.get("description", ""),
                icon=meta.get("icon", ""),
                count=len(self._components_by_category.get(cat_id, ())),
            ))
        return result


# ============================================================
# Default Catalog
# ============================================================

def load_default_catalog() -> Catalog:
    """Build the catalog from the bundled data tables"""
    catalog = Catalog.from_records(
        components=catalog_data.COMPONENT_DATABASE,
        elements=catalog_data.ELEMENT_DATABASE,
        zones=catalog_data.ZONE_DATABASE,
        themes=catalog_data.THEME_DATABASE,
        element_categories=catalog_data.ELEMENT_CATEGORY_DATABASE,
        component_categories=catalog_data.COMPONENT_CATEGORY_DATABASE,
    )
    if len(catalog.all_themes()) != EXPECTED_THEME_COUNT:
        raise CatalogError(
            f"Expected {EXPECTED_THEME_COUNT} themes, found {len(catalog.all_themes())}"
        )

    logger.info(
        "Loaded catalog: %d components, %d elements, %d zones, %d themes",
        len(catalog.all_components()),
        len(catalog.all_elements()),
        len(catalog.all_zones()),
        len(catalog.all_themes()),
    )
    return catalog


# Singleton instance
_catalog: Optional[Catalog] = None


def get_catalog() -> Catalog:
    """Get or build the default catalog"""
    global _catalog
    if _catalog is None:
        _catalog = load_default_catalog()
    return _catalog
