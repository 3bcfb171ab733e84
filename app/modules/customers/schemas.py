from pydantic import BaseModel, Field, field_validator
from typing import List
from datetime import datetime
import re
from app.shared.schemas.common import BaseResponse

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

class CustomerCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="Nombre del cliente")
    email: str = Field(..., max_length=255, description="Email (único)")
    tax_id: str = Field(..., min_length=1, max_length=50, description="Documento fiscal (CPF/NIT)")

    class Config:
        extra = "forbid"

    @field_validator('name', 'tax_id')
    @classmethod
    def validate_not_blank(cls, v):
        if not v.strip():
            raise ValueError('El campo no puede estar vacío')
        return v.strip()

    @field_validator('email')
    @classmethod
    def validate_email(cls, v):
        v = v.strip().lower()
        if not EMAIL_PATTERN.match(v):
            raise ValueError('Email inválido')
        return v

class CustomerInfo(BaseModel):
    id: int
    name: str
    email: str
    tax_id: str
    created_at: datetime

    class Config:
        from_attributes = True

class CustomerResponse(BaseResponse):
    customer: CustomerInfo

class CustomerListResponse(BaseResponse):
    customers: List[CustomerInfo]
    count: int
