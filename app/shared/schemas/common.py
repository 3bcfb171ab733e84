# app/shared/schemas/common.py
from pydantic import BaseModel, Field
from typing import Any, Dict, Optional
from datetime import datetime

# Límite de las columnas INTEGER (32 bits) en PostgreSQL
MAX_DB_INTEGER = 2_147_483_647

class BaseResponse(BaseModel):
    success: bool
    message: str = ""
    timestamp: datetime = Field(default_factory=datetime.now)

class ErrorDetail(BaseModel):
    error_code: str
    message: str

    class Config:
        extra = "allow"

class ErrorResponse(BaseModel):
    detail: ErrorDetail

class HealthResponse(BaseModel):
    service: str
    status: str
    version: str
    details: Optional[Dict[str, Any]] = None
