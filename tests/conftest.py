import pytest

from ui_museum_mcp.accessors import CatalogAccessors
from ui_museum_mcp.catalog import Catalog, get_catalog
from ui_museum_mcp.query import QueryEngine


ZONES = [
    {"id": "neon-zone", "name": "Neon Alley", "description": "Night market", "aesthetic": "Glowing signs", "tags": ["neon", "night"]},
    {"id": "garden", "name": "Garden", "description": "Quiet greenhouse", "aesthetic": "Leafy calm", "tags": ["nature", "calm"]},
]

THEMES = [
    {"id": "light", "name": "Light", "description": "Light palette", "colors": {"primary": "#111111"}},
    {"id": "night", "name": "Night", "description": "Dark palette", "colors": {"primary": "#eeeeee"}},
]

COMPONENTS = [
    {"id": "c-hero-1", "name": "Neon Hero Glow", "description": "Glowing hero backdrop", "zone": "neon-zone", "categories": ["backgrounds"], "tags": ["hero", "glow"], "is_interactive": False},
    {"id": "c-hero-2", "name": "Hero Headline", "description": "Flickering headline", "zone": "neon-zone", "categories": ["typography"], "tags": ["hero", "text"], "is_interactive": True},
    {"id": "c-hero-3", "name": "Leaf Hero", "description": "Swaying leaves", "zone": "garden", "categories": ["backgrounds"], "tags": ["Hero", "leaf"], "is_interactive": True},
    {"id": "c-button", "name": "Leaf Button", "description": "Button with a leaf", "zone": "garden", "categories": ["buttons"], "tags": ["button", "leaf"], "is_interactive": True},
    {"id": "c-lonely", "name": "Lonely Clock", "description": "A ticking clock", "zone": "garden", "categories": ["widgets"], "tags": ["clock"], "is_interactive": False},
]

ELEMENTS = [
    {"id": "e-dot", "name": "Dot Grid", "description": "Dotted pattern", "layer": "atom", "category": "backgrounds", "tags": ["background", "dots"]},
    {"id": "e-shadow", "name": "Soft Shadow", "description": "Soft drop shadow", "layer": "atom", "category": "shadows", "tags": ["shadow", "glow", "neon"]},
    {"id": "e-btn", "name": "Main Button", "description": "Primary action", "layer": "molecule", "category": "buttons", "tags": ["button", "cta"], "composed_of": ["e-shadow"]},
    {"id": "e-input", "name": "Text Field", "description": "Single line input", "layer": "molecule", "category": "inputs", "tags": ["input", "form"]},
    {
        "id": "e-hero",
        "name": "Hero Block",
        "description": "Big opening section",
        "layer": "organism",
        "category": "layout",
        "tags": ["hero", "landing"],
        "composed_of": ["e-btn", "e-dot"],
        "slots": [{"id": "title", "name": "Title", "type": "text", "required": True}],
    },
    {"id": "e-page", "name": "Landing Template", "description": "Full page", "layer": "template", "category": "marketing", "tags": ["template"], "composed_of": ["e-hero"]},
]

ELEMENT_CATEGORIES = [
    {"id": "backgrounds", "name": "Backgrounds", "description": "Patterns", "icon": "Layers", "layer": "atom"},
    {"id": "empty-cat", "name": "Empty", "description": "Nothing here yet", "icon": "Box", "layer": "atom"},
    {"id": "buttons", "name": "Buttons", "description": "Clickable", "icon": "MousePointerClick", "layer": "molecule"},
]

COMPONENT_CATEGORIES = [
    {"id": "backgrounds", "name": "Backgrounds & Ambience", "description": "Atmosphere", "icon": "Layers"},
]


def build_catalog(**overrides) -> Catalog:
    records = {
        "components": COMPONENTS,
        "elements": ELEMENTS,
        "zones": ZONES,
        "themes": THEMES,
        "element_categories": ELEMENT_CATEGORIES,
        "component_categories": COMPONENT_CATEGORIES,
    }
    records.update(overrides)
    return Catalog.from_records(**records)


@pytest.fixture
def catalog():
    return build_catalog()


@pytest.fixture
def engine(catalog):
    return QueryEngine(catalog)


@pytest.fixture
def accessors(catalog):
    return CatalogAccessors(catalog)


@pytest.fixture(scope="session")
def default_catalog():
    return get_catalog()
