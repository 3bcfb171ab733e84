# app/modules/sales/schemas.py
from pydantic import BaseModel, Field
from typing import List, Optional
from decimal import Decimal
from datetime import datetime
from app.shared.schemas.common import BaseResponse, MAX_DB_INTEGER

class SaleItemRequest(BaseModel):
    product_id: int = Field(..., gt=0, le=MAX_DB_INTEGER, description="ID del producto")
    quantity: int = Field(..., gt=0, le=MAX_DB_INTEGER, description="Cantidad")

    # NO incluir unit_price - se toma de BD al procesar la venta

    class Config:
        extra = "forbid"

class SaleCreateRequest(BaseModel):
    customer_id: int = Field(..., gt=0, le=MAX_DB_INTEGER, description="ID del cliente")
    items: List[SaleItemRequest] = Field(..., min_length=1, description="Items de la venta")

    class Config:
        extra = "forbid"
        json_schema_extra = {
            "example": {
                "customer_id": 1,
                "items": [
                    {"product_id": 1, "quantity": 2},
                    {"product_id": 2, "quantity": 1}
                ]
            }
        }

class SaleCustomerInfo(BaseModel):
    id: int
    name: str
    email: str
    tax_id: str

    class Config:
        from_attributes = True

class SaleProductInfo(BaseModel):
    id: int
    name: str
    description: Optional[str] = None
    unit_price: Decimal

    class Config:
        from_attributes = True

class SaleItemDetail(BaseModel):
    id: int
    product_id: int
    quantity: int
    unit_price: Decimal
    subtotal: Decimal
    product: SaleProductInfo

    class Config:
        from_attributes = True

class SaleDetail(BaseModel):
    id: int
    sale_date: datetime
    total_amount: Decimal
    customer: SaleCustomerInfo
    items: List[SaleItemDetail]

    class Config:
        from_attributes = True

class SaleResponse(BaseResponse):
    sale: SaleDetail

class SaleListResponse(BaseResponse):
    sales: List[SaleDetail]
    count: int
