from __future__ import annotations

from fastapi import APIRouter, Depends

from calles.api.deps import get_settings, get_street_map
from calles.api.mappers import map_directives, map_results, map_state
from calles.core.config import Settings
from calles.core.exceptions import ValidationError
from calles.schemas.common import ErrorResponse
from calles.schemas.streets import CommandRequest, CommandResponse
from calles.services.commands import (
    ClearSelection,
    Command,
    RestoreLocation,
    SearchStreets,
    SelectStreet,
    StreetMapSession,
)
from calles.services.loader import StreetMap
from calles.services.selection import SelectionState

router = APIRouter(prefix="/session", tags=["session"])


def _to_command(body: CommandRequest) -> Command:
    if body.command == "select":
        if not body.name:
            raise ValidationError("name is required for select")
        return SelectStreet(name=body.name, persist=body.persist)
    if body.command == "clear":
        return ClearSelection(persist=body.persist)
    if body.command == "search":
        return SearchStreets(query=body.query or "")
    return RestoreLocation(location=body.location)


@router.post(
    "/commands",
    response_model=CommandResponse,
    summary="Despachar un comando de la interfaz",
    description=(
        "Aplica select/clear/search/restore sobre el estado de selección que envía el "
        "cliente y devuelve el nuevo estado con las directivas para el mapa."
    ),
    responses={400: {"model": ErrorResponse, "description": "invalid command"}},
)
async def dispatch_command(
    body: CommandRequest,
    street_map: StreetMap = Depends(get_street_map),
    settings: Settings = Depends(get_settings),
):
    state = SelectionState(
        selected_name=body.state.selected_name, previous_name=body.state.previous_name
    )
    session = StreetMapSession(street_map, settings, state=state)
    result = session.dispatch(_to_command(body))
    return CommandResponse(
        found=result.found,
        state=map_state(result.state),
        directives=map_directives(
            result.directives,
            allowed_domains=settings.wikipedia_domains,
            location_param=settings.location_param,
        ),
        results=map_results(result.results),
    )
