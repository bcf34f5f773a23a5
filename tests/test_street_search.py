import pytest

from calles.services.history_index import HistoryIndex
from calles.services.street_catalog import GeometryFeature, StreetCatalog
from calles.services.street_search import SearchResult, search_streets

from tests.factories import make_segment


def _catalog(names, records=()):
    features = [
        GeometryFeature(name, make_segment(f"s{i}", (0.0, 0.0))) for i, name in enumerate(names)
    ]
    return StreetCatalog.build(features, HistoryIndex.build(records))


def test_single_match_among_ten_names(records) -> None:
    names = [
        "Avenida Rivadavia",
        "Bolívar",
        "Chacabuco",
        "Defensa",
        "Esmeralda",
        "Florida",
        "Maipú",
        "Perú",
        "Suipacha",
        "Tacuarí",
    ]
    catalog = _catalog(names, records)

    results = search_streets("rivad", catalog, 10)

    assert results == [SearchResult("Avenida Rivadavia", True)]


def test_has_history_reflects_catalog(street_map) -> None:
    results = search_streets("historia", street_map.catalog, 10)
    assert results == [SearchResult("Calle Sin Historia", False)]


def test_results_never_exceed_limit_and_keep_order() -> None:
    names = [f"Pasaje Luna {i:02d}" for i in range(15, 0, -1)]
    catalog = _catalog(names)

    results = search_streets("luna", catalog, 10)

    assert len(results) == 10
    assert [r.name for r in results] == [f"Pasaje Luna {i:02d}" for i in range(1, 11)]
    assert len(search_streets("luna", catalog, 3)) == 3
    assert search_streets("luna", catalog, 0) == []


def test_query_is_normalized(street_map) -> None:
    names = [r.name for r in search_streets("Dr. Finochietto", street_map.catalog)]
    assert names == ["Enrique Finochietto"]
    names = [r.name for r in search_streets("FINÓCHIETTO", street_map.catalog)]
    assert names == ["Enrique Finochietto"]


def test_single_character_query(street_map) -> None:
    names = [r.name for r in search_streets("z", street_map.catalog)]
    assert names == []
    names = [r.name for r in search_streets("b", street_map.catalog)]
    assert names == ["Esteban Bonorino"]


def test_query_normalizing_to_empty_matches_every_name(street_map) -> None:
    catalog = street_map.catalog
    assert [r.name for r in search_streets(" ,. ", catalog)] == list(catalog.all_names())
    assert [r.name for r in search_streets(".", catalog, 2)] == [
        "Avenida Rivadavia",
        "Calle Sin Historia",
    ]


@pytest.mark.parametrize("query", ["", "   ", None])
def test_blank_query_matches_nothing(street_map, query) -> None:
    assert search_streets(query, street_map.catalog) == []
