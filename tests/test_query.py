import pytest

from ui_museum_mcp.catalog import Layer
from ui_museum_mcp.query import DEFAULT_LIMIT, QueryEngine, SearchCriteria


def ids(entries):
    return [e.id for e in entries]


def test_no_criteria_returns_catalog_in_order(engine):
    assert ids(engine.search()) == ["e-dot", "e-shadow", "e-btn", "e-input", "e-hero", "e-page"]


def test_default_limit_is_ten(default_catalog):
    engine = QueryEngine(default_catalog)
    assert len(engine.search(SearchCriteria())) == DEFAULT_LIMIT == 10


def test_limit_truncates_after_filtering(engine):
    assert ids(engine.search({"layer": "molecule", "limit": 1})) == ["e-btn"]


def test_non_positive_limit_returns_nothing(engine):
    assert engine.search({"limit": 0}) == []
    assert engine.search_components({"limit": -3}) == []


def test_query_matches_name_description_and_tags(engine):
    assert ids(engine.search({"query": "drop"})) == ["e-shadow"]     # description
    assert ids(engine.search({"query": "FIELD"})) == ["e-input"]     # name
    assert ids(engine.search({"query": "glow"})) == ["e-shadow"]     # tag


def test_empty_query_is_no_constraint(engine):
    assert len(engine.search({"query": ""})) == 6


def test_tags_match_any_case_insensitively(engine):
    found = engine.search_components({"tags": ["HERO"]})
    assert ids(found) == ["c-hero-1", "c-hero-2", "c-hero-3"]

    found = engine.search({"tags": ["dots", "form"]})
    assert ids(found) == ["e-dot", "e-input"]


def test_empty_tags_is_no_constraint(engine):
    assert len(engine.search({"tags": []})) == 6


def test_hero_tag_with_limit_two(engine):
    found = engine.search_components(SearchCriteria(tags=["hero"], limit=2))
    assert len(found) == 2
    assert all("hero" in [t.lower() for t in c.tags] for c in found)


def test_filters_combine_with_and(engine):
    assert ids(engine.search({"layer": Layer.ATOM, "tags": ["glow"]})) == ["e-shadow"]
    assert engine.search({"layer": "organism", "category": "buttons"}) == []
    assert ids(engine.search({"category": "buttons", "query": "primary"})) == ["e-btn"]


def test_unknown_values_yield_no_matches(engine):
    assert engine.search({"category": "nope"}) == []
    assert engine.search({"layer": "quark"}) == []
    assert engine.search({"tags": ["nope"]}) == []
    assert engine.search_components({"zone": "atlantis"}) == []


def test_component_zone_and_interactivity(engine):
    found = engine.search_components({"zone": "garden", "is_interactive": True})
    assert ids(found) == ["c-hero-3", "c-button"]

    found = engine.search_components({"is_interactive": False})
    assert ids(found) == ["c-hero-1", "c-lonely"]


def test_component_category_matches_any_of_its_categories(engine):
    assert ids(engine.search_components({"category": "backgrounds"})) == ["c-hero-1", "c-hero-3"]


def test_from_dict_ignores_unknown_and_none():
    criteria = SearchCriteria.from_dict({"query": "x", "limit": None, "colour": "red"})
    assert criteria.query == "x"
    assert criteria.limit == DEFAULT_LIMIT


def test_search_does_not_mutate_catalog(engine, catalog):
    before = [e.tags[:] for e in catalog.all_elements()]
    engine.search({"tags": ["hero"], "query": "block"})
    assert [e.tags for e in catalog.all_elements()] == before


def test_similar_components_scores_and_orders(engine):
    # c-hero-3: shared category (+3) and tag (+2); c-hero-2: same zone (+2) and tag (+2)
    assert ids(engine.similar_components("c-hero-1")) == ["c-hero-3", "c-hero-2"]


def test_similar_components_excludes_self(engine):
    assert "c-button" not in ids(engine.similar_components("c-button", limit=10))


def test_similar_components_unknown_id(engine):
    assert engine.similar_components("missing") == []


def test_similar_components_tie_keeps_catalog_order(engine):
    # c-hero-3 and c-button both score 2 (same zone only)
    assert ids(engine.similar_components("c-lonely")) == ["c-hero-3", "c-button"]


def test_completions_names_then_tags(engine):
    assert engine.completions("lea") == ["Leaf Hero", "Leaf Button", "leaf"]
    assert engine.completions("clo") == ["Lonely Clock", "clock"]
    assert engine.completions("widg") == ["widgets"]


def test_completions_need_two_characters(engine):
    assert engine.completions("l") == []
    assert engine.completions("") == []


def test_completions_respect_limit(engine):
    assert len(engine.completions("he", limit=2)) == 2


@pytest.mark.parametrize("text,expected", [
    ("NEON", "neon-zone"),       # tag
    ("glowing", "neon-zone"),    # aesthetic
    ("garden", "garden"),        # name
])
def test_zone_matching(engine, text, expected):
    assert engine.first_zone_matching(text).id == expected


def test_zone_matching_miss(engine):
    assert engine.zones_matching("xyznonexistent123") == []
    assert engine.first_zone_matching("xyznonexistent123") is None


def test_repeated_search_is_stable(engine):
    criteria = SearchCriteria(tags=["hero", "button"], query="e", limit=3)
    assert ids(engine.search(criteria)) == ids(engine.search(criteria))

    criteria = {"tags": ["leaf", "hero"], "query": "a", "limit": 2}
    first = ids(engine.search_components(criteria))
    assert first == ids(engine.search_components(criteria))
    assert first == ["c-hero-1", "c-hero-2"]


def test_layers_partition_default_elements(default_catalog):
    by_layer = [default_catalog.by_layer(layer) for layer in Layer]
    assert sum(len(group) for group in by_layer) == len(default_catalog.all_elements())

    id_sets = [{e.id for e in group} for group in by_layer]
    for i, first in enumerate(id_sets):
        for second in id_sets[i + 1:]:
            assert first.isdisjoint(second)
