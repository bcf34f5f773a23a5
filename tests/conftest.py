# tests/conftest.py
import json
import os

import pytest
import pytest_asyncio
from dotenv import load_dotenv
from httpx import ASGITransport, AsyncClient

from calles.core.config import Settings
from calles.main import create_app
from calles.schemas.history import HistoricalRecord
from calles.services.loader import StreetMap
from calles.services.street_catalog import GeometryFeature
from tests.factories import sample_features, sample_records

# Load .env.test if available
load_dotenv(".env.test", override=False)
os.environ.setdefault("APP_ENV", "test")


@pytest.fixture
def records() -> list[HistoricalRecord]:
    return sample_records()


@pytest.fixture
def features() -> list[GeometryFeature]:
    return sample_features()


@pytest.fixture
def street_map(records, features) -> StreetMap:
    return StreetMap.build(records, features)


@pytest.fixture
def settings() -> Settings:
    return Settings()


def _feature_json(feature: GeometryFeature) -> dict:
    segment = feature.segment
    return {
        "type": "Feature",
        "properties": {"id": segment.id, "name": feature.display_name, "highway": "residential"},
        "geometry": {
            "type": "LineString",
            "coordinates": [list(point) for point in segment.coordinates[0]],
        },
    }


@pytest.fixture
def data_files(tmp_path, records, features):
    history_path = tmp_path / "calles.json"
    geometry_path = tmp_path / "streets.geojson"
    history_path.write_text(
        json.dumps({"streets": [r.model_dump(mode="json") for r in records]}),
        encoding="utf-8",
    )
    geometry_path.write_text(
        json.dumps(
            {"type": "FeatureCollection", "features": [_feature_json(f) for f in features]}
        ),
        encoding="utf-8",
    )
    return history_path, geometry_path


@pytest_asyncio.fixture
async def app_client(street_map, settings):
    app = create_app(settings=settings, street_map=street_map)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
