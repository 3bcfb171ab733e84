# app/modules/products/router.py
from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from app.config.database import get_db
from app.shared.schemas.common import ErrorResponse, MAX_DB_INTEGER
from .service import ProductsService
from .schemas import (
    ProductCreateRequest, ProductUpdateRequest,
    ProductResponse, ProductListResponse
)

router = APIRouter()

@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    product_request: ProductCreateRequest,
    db: Session = Depends(get_db)
):
    """Registrar un producto con precio y stock inicial"""
    service = ProductsService(db)
    return await service.create_product(product_request)

@router.get("", response_model=ProductListResponse)
async def list_products(db: Session = Depends(get_db)):
    """Listar productos con stock actual"""
    service = ProductsService(db)
    return await service.list_products()

@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses={404: {"model": ErrorResponse}}
)
async def get_product(
    product_id: int = Path(..., gt=0, le=MAX_DB_INTEGER),
    db: Session = Depends(get_db)
):
    """Obtener un producto por ID"""
    service = ProductsService(db)
    return await service.get_product(product_id)

@router.patch(
    "/{product_id}",
    response_model=ProductResponse,
    responses={404: {"model": ErrorResponse}}
)
async def update_product(
    product_request: ProductUpdateRequest,
    product_id: int = Path(..., gt=0, le=MAX_DB_INTEGER),
    db: Session = Depends(get_db)
):
    """
    Actualizar nombre, descripción o precio

    El stock no es editable: solo se descuenta al registrar ventas.
    """
    service = ProductsService(db)
    return await service.update_product(product_id, product_request)
