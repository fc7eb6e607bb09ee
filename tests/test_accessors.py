from ui_museum_mcp.accessors import CatalogAccessors, get_accessors


def test_search_elements_returns_plain_dicts(accessors):
    found = accessors.search_elements(layer="atom")
    assert [e["id"] for e in found] == ["e-dot", "e-shadow"]
    assert found[0]["layer"] == "atom"
    assert isinstance(found[0]["layer"], str)


def test_search_components_passes_criteria(accessors):
    found = accessors.search_components(zone="neon-zone", is_interactive=True)
    assert [c["id"] for c in found] == ["c-hero-2"]


def test_get_by_id_and_lookup(accessors):
    assert accessors.get_by_id("c-lonely")["zone"] == "garden"
    assert accessors.get_by_id("e-input")["category"] == "inputs"
    assert accessors.get_by_id("missing") is None

    assert accessors.lookup("e-input")["kind"] == "element"
    assert accessors.lookup("c-lonely")["kind"] == "component"
    assert accessors.lookup("missing") is None


def test_get_element_and_component_stay_in_their_namespace(accessors):
    assert accessors.get_element("c-lonely") is None
    assert accessors.get_component("e-input") is None
    assert accessors.get_element("e-hero")["slots"][0]["id"] == "title"


def test_composition_and_usage(accessors):
    assert [e["id"] for e in accessors.get_element_composition("e-hero")] == ["e-btn", "e-dot"]
    assert [e["id"] for e in accessors.get_element_usage("e-btn")] == ["e-hero"]
    assert accessors.get_element_composition("missing") == []
    assert accessors.get_element_usage("e-page") == []


def test_layers(accessors):
    assert [e["id"] for e in accessors.get_elements_by_layer("template")] == ["e-page"]
    assert accessors.get_elements_by_layer("bogus") == []
    assert accessors.count_by_layer() == {"atom": 2, "molecule": 2, "organism": 1, "template": 1}


def test_get_categories_first_seen_order(accessors):
    categories = accessors.get_categories()
    assert list(categories) == ["backgrounds", "shadows", "buttons", "inputs", "layout", "marketing"]
    assert categories["buttons"] == {"count": 1, "layer": "molecule"}
    assert sum(c["count"] for c in categories.values()) == 6


def test_category_details(accessors):
    molecules = accessors.get_category_details("molecule")
    assert [c["id"] for c in molecules] == ["buttons", "inputs"]
    assert molecules[0]["icon"] == "MousePointerClick"
    assert {c["id"] for c in accessors.get_component_categories()} == {
        "backgrounds", "typography", "buttons", "widgets"
    }


def test_themes(accessors):
    assert [t["id"] for t in accessors.list_themes()] == ["light", "night"]
    assert accessors.get_theme_by_id("light")["colors"]["primary"] == "#111111"
    assert accessors.get_theme_by_id("sepia") is None


def test_zones_carry_live_component_count(accessors):
    zones = {z["id"]: z for z in accessors.list_zones()}
    assert zones["neon-zone"]["component_count"] == 2
    assert zones["garden"]["component_count"] == 3
    assert accessors.get_zone_by_id("garden")["component_count"] == 3
    assert accessors.get_zone_by_id("atlantis") is None


def test_search_zones(accessors):
    assert len(accessors.search_zones()) == 2
    assert len(accessors.search_zones("")) == 2
    assert [z["id"] for z in accessors.search_zones("leafy")] == ["garden"]
    assert accessors.search_zones("xyznonexistent123") == []


def test_zone_components_use_first_two_zone_tags(accessors):
    assert [e["id"] for e in accessors.get_zone_components("neon-zone")] == ["e-shadow"]
    assert accessors.get_zone_components("neon-zone", layer="molecule") == []
    assert accessors.get_zone_components("atlantis") is None


def test_components_by_zone(accessors):
    assert [c["id"] for c in accessors.get_components_by_zone("neon-zone")] == ["c-hero-1", "c-hero-2"]
    assert accessors.get_components_by_zone("atlantis") == []


def test_similar_and_completions(accessors):
    assert [c["id"] for c in accessors.similar_components("c-hero-1", limit=1)] == ["c-hero-3"]
    assert accessors.completions("lea", limit=1) == ["Leaf Hero"]


def test_stats(accessors):
    stats = accessors.stats()
    assert stats["components"] == 5
    assert stats["elements"] == 6
    assert stats["zones"] == 2
    assert stats["themes"] == 2
    assert stats["interactive_components"] == 3
    assert stats["tags"] == sorted(stats["tags"])
    assert "widgets" in stats["categories"]


def test_suggest_components_flattens_suggestions(accessors):
    result = accessors.suggest_components("Build a login form", aesthetic="calm")
    assert result["query"] == "Build a login form"
    assert result["aesthetic"] == "calm"
    assert result["count"] == len(result["suggestions"]) == 2
    first = result["suggestions"][0]
    assert first["id"] == "e-input"
    assert first["reason"] == "Form input component"
    assert first["suggested_zone"] == "Garden"


def test_get_accessors_uses_default_catalog(default_catalog):
    shared = get_accessors()
    assert isinstance(shared, CatalogAccessors)
    assert shared.catalog is default_catalog
    assert get_accessors() is shared
