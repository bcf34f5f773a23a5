from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from calles.api.deps import get_settings, get_street_map
from calles.api.mappers import map_results
from calles.core.config import Settings
from calles.schemas.streets import StreetListItem
from calles.services.loader import StreetMap
from calles.services.street_search import search_streets

router = APIRouter(prefix="/suggest", tags=["suggest"])


@router.get(
    "/streets",
    response_model=list[StreetListItem],
    summary="Sugerencias de calles (coincidencia parcial normalizada)",
    description=(
        "Normaliza la consulta y la busca como subcadena de los nombres normalizados. "
        "Consultas más cortas que el mínimo configurado devuelven una lista vacía."
    ),
)
async def suggest_streets(
    q: str = Query(..., description="Texto de búsqueda"),
    limit: int | None = Query(None, ge=1, le=100),
    street_map: StreetMap = Depends(get_street_map),
    settings: Settings = Depends(get_settings),
):
    query = q.strip()
    if len(query) < settings.search_min_query_length:
        return []
    results = search_streets(query, street_map.catalog, limit or settings.search_limit)
    return map_results(results)
