from __future__ import annotations

from pydantic import BaseModel, Field

__all__ = ["DetailPanel", "PanelPreviousName", "PanelWikipedia"]


class PanelPreviousName(BaseModel):
    name: str
    description: str | None = None


class PanelWikipedia(BaseModel):
    summary: str | None = None
    url: str


class DetailPanel(BaseModel):
    title: str = Field(description="Título del panel")
    street_name: str = Field(description="Nombre de la calle en el mapa")
    has_history: bool = Field(description="Si hay un registro histórico asociado")
    description: str | None = Field(default=None, description="Sección Historia")
    legal_basis: str | None = Field(default=None, description="Sección Base legal")
    previous_names: list[PanelPreviousName] = Field(
        default_factory=list, description="Sección Nombres anteriores"
    )
    wikipedia: PanelWikipedia | None = Field(default=None, description="Sección Wikipedia")
    message: str | None = Field(default=None, description="Texto alternativo sin historia")
