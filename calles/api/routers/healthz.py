# calles/api/routers/healthz.py
from fastapi import APIRouter

from calles.schemas.common import OkResponse

router = APIRouter(prefix="/healthz", tags=["health"])


@router.get(
    "",
    response_model=OkResponse,
    summary="Liveness probe",
    description="Devuelve 200 sin consultar los datos cargados.",
)
async def healthz():
    return {"ok": True}
