# calles/schemas/common.py
from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    detail: str = Field(description="Mensaje de error")

    model_config = {"json_schema_extra": {"examples": [{"detail": "Not Found"}]}}


class OkResponse(BaseModel):
    ok: bool = Field(description="Siempre true cuando el servicio responde")

    model_config = {"json_schema_extra": {"examples": [{"ok": True}]}}
