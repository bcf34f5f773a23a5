from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from calles.api.deps import get_dataset_holder
from calles.schemas.common import OkResponse
from calles.services.loader import DatasetHolder, DatasetStatus

router = APIRouter(prefix="/readyz", tags=["health"])


@router.get(
    "",
    response_model=OkResponse,
    summary="Readiness probe",
    description="503 mientras los datos de calles se cargan o si la carga falló.",
)
async def readyz(holder: DatasetHolder = Depends(get_dataset_holder)):
    if holder.status is DatasetStatus.ready:
        return {"ok": True}

    if holder.status is DatasetStatus.loading:
        payload = {
            "error": {
                "code": "dataset_loading",
                "message": "Street datasets are still loading",
            }
        }
    else:
        payload = {
            "error": {
                "code": "dataset_unavailable",
                "message": holder.street_map.load_error or "Street datasets failed to load",
            }
        }
        if holder.error_detail:
            payload["error"]["detail"] = holder.error_detail
    return JSONResponse(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=payload)
