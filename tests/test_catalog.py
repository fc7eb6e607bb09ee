import dataclasses

import pytest

from ui_museum_mcp.catalog import (
    Catalog,
    CatalogError,
    Component,
    Element,
    EntryKind,
    Layer,
    get_catalog,
)

from .conftest import COMPONENTS, ELEMENTS, build_catalog


def test_collections_keep_catalog_order(catalog):
    assert [c.id for c in catalog.all_components()] == [c["id"] for c in COMPONENTS]
    assert [e.id for e in catalog.all_elements()] == [e["id"] for e in ELEMENTS]
    assert len(catalog.all_zones()) == 2
    assert len(catalog.all_themes()) == 2


def test_by_id_checks_components_then_elements(catalog):
    assert isinstance(catalog.by_id("c-button"), Component)
    assert isinstance(catalog.by_id("e-btn"), Element)
    assert catalog.by_id("missing") is None


def test_lookup_is_tagged(catalog):
    found = catalog.lookup("c-hero-1")
    assert found.kind == EntryKind.COMPONENT
    assert found.entry.name == "Neon Hero Glow"

    found = catalog.lookup("e-hero")
    assert found.kind == EntryKind.ELEMENT
    assert found.entry.slots[0].required is True

    assert catalog.lookup("missing") is None


def test_by_layer_accepts_enum_and_string(catalog):
    assert [e.id for e in catalog.by_layer(Layer.ATOM)] == ["e-dot", "e-shadow"]
    assert [e.id for e in catalog.by_layer("Molecule")] == ["e-btn", "e-input"]
    assert catalog.by_layer("bogus") == ()


def test_by_category_prefers_element_namespace(catalog):
    # "buttons" exists for both elements and components
    assert [e.id for e in catalog.by_category("buttons")] == ["e-btn"]
    assert [c.id for c in catalog.by_category("widgets")] == ["c-lonely"]
    assert [c.id for c in catalog.components_by_category("buttons")] == ["c-button"]
    assert catalog.by_category("nope") == ()


def test_by_zone(catalog):
    assert [c.id for c in catalog.by_zone("garden")] == ["c-hero-3", "c-button", "c-lonely"]
    assert catalog.by_zone("atlantis") == ()


def test_single_lookups(catalog):
    assert catalog.zone("garden").name == "Garden"
    assert catalog.theme("night").colors["primary"] == "#eeeeee"
    assert catalog.zone("nope") is None
    assert catalog.theme("nope") is None


def test_element_categories_have_live_counts(catalog):
    categories = {c.id: c for c in catalog.element_categories()}
    assert categories["backgrounds"].count == 1
    assert categories["empty-cat"].count == 0
    # No metadata, so the name is derived from the id
    assert categories["layout"].name == "Layout"
    assert categories["layout"].layer == "organism"

    atoms = [c.id for c in catalog.element_categories("atom")]
    assert atoms == ["backgrounds", "empty-cat", "shadows"]
    assert catalog.element_categories("bogus") == []


def test_component_categories_have_live_counts(catalog):
    categories = {c.id: c for c in catalog.component_categories()}
    assert categories["backgrounds"].count == 2
    assert categories["backgrounds"].name == "Backgrounds & Ambience"
    assert categories["widgets"].count == 1
    assert categories["widgets"].layer is None


def test_duplicate_component_id_rejected():
    with pytest.raises(CatalogError, match="Duplicate component id"):
        build_catalog(components=COMPONENTS + [COMPONENTS[0]])


def test_duplicate_element_id_rejected():
    with pytest.raises(CatalogError, match="Duplicate element id"):
        build_catalog(elements=ELEMENTS + [ELEMENTS[0]])


def test_shared_id_rejected():
    clash = dict(ELEMENTS[0], id="c-button")
    with pytest.raises(CatalogError, match="shared"):
        build_catalog(elements=ELEMENTS + [clash])


def test_unknown_zone_rejected():
    stray = dict(COMPONENTS[0], id="c-stray", zone="atlantis")
    with pytest.raises(CatalogError, match="unknown zone"):
        build_catalog(components=COMPONENTS + [stray])


def test_component_without_categories_rejected():
    bare = dict(COMPONENTS[0], id="c-bare", categories=[])
    with pytest.raises(CatalogError, match="no categories"):
        build_catalog(components=COMPONENTS + [bare])


def test_invalid_layer_rejected():
    odd = dict(ELEMENTS[0], id="e-odd", layer="quark")
    with pytest.raises(CatalogError, match="invalid layer"):
        build_catalog(elements=ELEMENTS + [odd])


def test_catalog_error_is_value_error():
    assert issubclass(CatalogError, ValueError)


def test_empty_catalog_is_valid():
    empty = Catalog(components=[], elements=[], zones=[], themes=[])
    assert empty.all_components() == ()
    assert empty.by_layer("atom") == ()


# Bundled catalog

def test_default_catalog_has_six_themes(default_catalog):
    assert [t.id for t in default_catalog.all_themes()] == [
        "default", "dark", "brutal", "neon", "cosmic", "glass"
    ]


def test_default_catalog_is_singleton(default_catalog):
    assert get_catalog() is default_catalog


def test_default_composition_ids_resolve(default_catalog):
    for elem in default_catalog.all_elements():
        for child_id in elem.composed_of:
            assert default_catalog.element(child_id) is not None, f"{elem.id} -> {child_id}"


def test_default_components_resolve_zones(default_catalog):
    zone_ids = {z.id for z in default_catalog.all_zones()}
    assert len(zone_ids) == 16
    for comp in default_catalog.all_components():
        assert comp.zone in zone_ids
        assert comp.categories


def test_default_category_metadata_covers_all_element_categories(default_catalog):
    for info in default_catalog.element_categories():
        assert info.count > 0, f"category {info.id} is unused"
        assert info.layer in {layer.value for layer in Layer}


def test_records_are_immutable(catalog):
    elem = catalog.element("e-hero")
    with pytest.raises(dataclasses.FrozenInstanceError):
        elem.name = "Renamed"
    with pytest.raises(dataclasses.FrozenInstanceError):
        catalog.component("c-button").zone = "neon-zone"
    with pytest.raises(dataclasses.FrozenInstanceError):
        catalog.zone("garden").aesthetic = "Loud"

    assert isinstance(elem.tags, tuple)
    assert isinstance(elem.composed_of, tuple)
    assert isinstance(catalog.component("c-button").categories, tuple)
    assert isinstance(catalog.zone("garden").tags, tuple)
