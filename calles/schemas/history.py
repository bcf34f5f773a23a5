"""Historical street records as loaded from the naming dataset."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

__all__ = ["HistoricalRecord", "PreviousName", "WikipediaInfo"]


class PreviousName(BaseModel):
    name: str = Field(description="Nombre anterior")
    description: str | None = Field(default=None, description="Detalle del cambio")

    model_config = ConfigDict(frozen=True, extra="ignore")


class WikipediaInfo(BaseModel):
    title: str | None = Field(default=None, description="Título del artículo")
    summary: str | None = Field(default=None, description="Resumen del artículo")
    url: str | None = Field(default=None, description="URL del artículo (sin validar)")

    model_config = ConfigDict(frozen=True, extra="ignore")


class HistoricalRecord(BaseModel):
    """One entry of the historical dataset. Immutable once loaded."""

    current_name: str = Field(min_length=1, description="Nombre actual de la calle")
    description: str | None = Field(default=None, description="Historia")
    legal_basis: str | None = Field(default=None, description="Base legal")
    previous_names: tuple[str | PreviousName, ...] = Field(
        default=(),
        validation_alias=AliasChoices("previous_names", "old_names"),
        description="Nombres anteriores, en orden",
    )
    wikipedia: WikipediaInfo | None = Field(default=None, description="Artículo relacionado")

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    @field_validator("previous_names", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return () if value is None else value
