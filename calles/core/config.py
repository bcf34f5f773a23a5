# calles/core/config.py
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATA_DIR = Path("data")


class Settings(BaseSettings):
    history_path: Path = DEFAULT_DATA_DIR / "calles_buenos_aires_final.json"
    geometry_path: Path = DEFAULT_DATA_DIR / "buenos_aires_streets.geojson"

    search_limit: int = Field(default=10, ge=1)
    search_min_query_length: int = Field(default=2, ge=1)

    # Wikipedia links are shown only for https URLs on these hosts (or subdomains)
    wikipedia_domains: list[str] = Field(default_factory=lambda: ["wikipedia.org"])

    frame_padding: int = 50
    frame_max_zoom: int = 16

    location_param: str = "calle"
    load_error_message: str = (
        "Error al cargar los datos de las calles. Por favor, recarga la página."
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="CALLES_",
        extra="ignore",
    )

