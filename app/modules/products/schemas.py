from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from decimal import Decimal
from datetime import datetime
from app.shared.schemas.common import BaseResponse, MAX_DB_INTEGER

class ProductCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255, description="Nombre del producto")
    description: Optional[str] = Field(None, max_length=255, description="Descripción")
    unit_price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2, description="Precio unitario")
    stock_quantity: int = Field(0, ge=0, le=MAX_DB_INTEGER, description="Stock inicial")

    class Config:
        extra = "forbid"

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('El nombre no puede estar vacío')
        return v.strip()

class ProductUpdateRequest(BaseModel):
    """Datos editables. El stock no se modifica aquí: solo baja con ventas."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=255)
    unit_price: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)

    class Config:
        extra = "forbid"

    @field_validator('name', 'unit_price')
    @classmethod
    def reject_null(cls, v, info):
        # Omitir el campo lo deja igual; null explícito no es un valor válido
        if v is None:
            raise ValueError(f'{info.field_name} no puede ser null')
        return v

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('El nombre no puede estar vacío')
        return v.strip()

class ProductInfo(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    unit_price: Decimal
    stock_quantity: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True

class ProductResponse(BaseResponse):
    product: ProductInfo

class ProductListResponse(BaseResponse):
    products: List[ProductInfo]
    count: int
