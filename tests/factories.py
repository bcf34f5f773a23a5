"""Sample records and geometry used across the test suite."""

from calles.schemas.history import HistoricalRecord, PreviousName, WikipediaInfo
from calles.services.loader import StreetSegment
from calles.services.street_catalog import GeometryFeature


def make_segment(segment_id: str, *points: tuple[float, float]) -> StreetSegment:
    return StreetSegment(id=segment_id, coordinates=(tuple(points),))


def make_feature(
    name: str | None, segment_id: str, *points: tuple[float, float]
) -> GeometryFeature:
    return GeometryFeature(display_name=name, segment=make_segment(segment_id, *points))


RIVADAVIA = HistoricalRecord(
    current_name="Rivadavia, Bernardino",
    description="Primer presidente de las Provincias Unidas del Río de la Plata.",
    legal_basis="Ordenanza del 27/10/1857",
    wikipedia=WikipediaInfo(
        title="Avenida Rivadavia",
        summary="Una de las avenidas más largas de la ciudad.",
        url="https://es.wikipedia.org/wiki/Avenida_Rivadavia",
    ),
)
BONORINO = HistoricalRecord(current_name="Coronel Esteban Bonorino")
FINOCHIETTO = HistoricalRecord(current_name="Dr. Enrique Finochietto", description="Cirujano.")
ACEVEDO = HistoricalRecord(
    current_name="Acevedo, Eduardo",
    previous_names=("Calle 7", PreviousName(name="Del Sol", description="Hasta 1893.")),
    wikipedia=WikipediaInfo(summary="Enlace no confiable", url="http://evil.example.com/x"),
)


def sample_records() -> list[HistoricalRecord]:
    return [RIVADAVIA, BONORINO, FINOCHIETTO, ACEVEDO]


def sample_features() -> list[GeometryFeature]:
    return [
        make_feature("Avenida Rivadavia", "riv-1", (-58.40, -34.61), (-58.39, -34.60)),
        make_feature("Esteban Bonorino", "bon-1", (-58.45, -34.64), (-58.44, -34.63)),
        make_feature("Avenida Rivadavia", "riv-2", (-58.42, -34.62), (-58.41, -34.61)),
        make_feature("Enrique Finochietto", "fin-1", (-58.38, -34.63), (-58.37, -34.63)),
        make_feature("Eduardo Acevedo", "ace-1", (-58.44, -34.60), (-58.43, -34.60)),
        make_feature("Calle Sin Historia", "sin-1", (-58.50, -34.58), (-58.49, -34.57)),
        make_feature(None, "anon-1", (-58.46, -34.59), (-58.45, -34.59)),
        make_feature("", "anon-2", (-58.47, -34.59), (-58.46, -34.59)),
    ]
