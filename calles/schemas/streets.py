from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from calles.schemas.panel import DetailPanel

__all__ = [
    "CommandRequest",
    "CommandResponse",
    "DirectiveItem",
    "SelectionStateModel",
    "StreetListItem",
    "StreetRestoreResponse",
]


class StreetListItem(BaseModel):
    name: str = Field(description="Nombre de la calle en el mapa")
    has_history: bool = Field(description="Si tiene registro histórico")


class SelectionStateModel(BaseModel):
    selected_name: str | None = Field(default=None, description="Calle seleccionada")
    previous_name: str | None = Field(default=None, description="Selección anterior")


class StreetRestoreResponse(BaseModel):
    name: str = Field(description="Nombre resuelto desde la ubicación compartida")
    location: str = Field(description="Ubicación compartible normalizada")
    panel: DetailPanel


class CommandRequest(BaseModel):
    command: Literal["select", "clear", "search", "restore"] = Field(description="Comando UI")
    name: str | None = Field(default=None, description="Calle (select)")
    query: str | None = Field(default=None, description="Texto de búsqueda (search)")
    location: str | None = Field(default=None, description="Ubicación compartida (restore)")
    persist: bool = Field(default=True, description="Emitir persistencia de la selección")
    state: SelectionStateModel = Field(default_factory=SelectionStateModel)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "command": "select",
                    "name": "Avenida Rivadavia",
                    "state": {"selected_name": None, "previous_name": None},
                }
            ]
        }
    }


class DirectiveItem(BaseModel):
    type: Literal["segment_style", "frame_viewport", "persist", "clear_persisted", "show_panel"]
    segment_id: str | None = None
    tier: str | None = None
    color: str | None = None
    weight: int | None = None
    bounds: list[list[float]] | None = None
    padding: int | None = None
    max_zoom: int | None = None
    location: str | None = None
    panel: DetailPanel | None = None


class CommandResponse(BaseModel):
    found: bool = Field(description="False cuando la calle pedida no existe")
    state: SelectionStateModel
    directives: list[DirectiveItem] = Field(default_factory=list)
    results: list[StreetListItem] = Field(default_factory=list)
