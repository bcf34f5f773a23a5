from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from calles.api.deps import get_settings, get_street_map
from calles.core.config import Settings
from calles.core.exceptions import NotFoundError
from calles.schemas.common import ErrorResponse
from calles.schemas.panel import DetailPanel
from calles.schemas.streets import StreetListItem, StreetRestoreResponse
from calles.services.loader import StreetMap
from calles.services.location import encode_location, resolve_location
from calles.services.panel import build_panel

router = APIRouter(prefix="/streets", tags=["streets"])


@router.get(
    "",
    response_model=list[StreetListItem],
    summary="Listado de calles",
    description="Nombres distintos del mapa en orden lexicográfico, con indicador de historia.",
)
async def list_streets(street_map: StreetMap = Depends(get_street_map)):
    catalog = street_map.catalog
    return [
        StreetListItem(name=entry.name, has_history=entry.has_history)
        for entry in catalog.entries()
    ]


@router.get(
    "/detail",
    response_model=DetailPanel,
    summary="Panel de detalle de una calle",
    description="Contenido del panel: registro histórico o aviso de que no hay historia.",
    responses={404: {"model": ErrorResponse, "description": "street not found"}},
)
async def street_detail(
    name: str = Query(..., min_length=1, description="Nombre exacto de la calle en el mapa"),
    street_map: StreetMap = Depends(get_street_map),
    settings: Settings = Depends(get_settings),
):
    entry = street_map.catalog.entry_for(name)
    if entry is None:
        raise NotFoundError("street not found")
    return build_panel(entry.name, entry.history, settings.wikipedia_domains)


@router.get(
    "/restore",
    response_model=StreetRestoreResponse,
    summary="Restaurar selección desde una ubicación compartida",
    description="Busca el nombre persistido (sin distinguir mayúsculas) en el catálogo.",
    responses={404: {"model": ErrorResponse, "description": "street not found"}},
)
async def restore_street(
    location: str = Query(..., description="URL o query string, p. ej. ?calle=Rivadavia"),
    street_map: StreetMap = Depends(get_street_map),
    settings: Settings = Depends(get_settings),
):
    name = resolve_location(street_map.catalog, location, settings.location_param)
    if name is None:
        raise NotFoundError("street not found")
    return StreetRestoreResponse(
        name=name,
        location=encode_location(name, settings.location_param),
        panel=build_panel(name, street_map.catalog.history_for(name), settings.wikipedia_domains),
    )
