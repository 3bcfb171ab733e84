# app/modules/sales/router.py
from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from app.config.database import get_db
from app.shared.schemas.common import ErrorResponse, HealthResponse, MAX_DB_INTEGER
from .service import SalesService
from .schemas import SaleCreateRequest, SaleResponse, SaleListResponse

router = APIRouter()

@router.post(
    "",
    response_model=SaleResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Request inválido o stock insuficiente"},
        404: {"model": ErrorResponse, "description": "Cliente o producto inexistente"},
        500: {"model": ErrorResponse, "description": "Error de persistencia"}
    }
)
async def register_sale(
    sale_request: SaleCreateRequest,
    db: Session = Depends(get_db)
):
    """
    Registrar venta con múltiples items

    **Incluye:**
    - Validación de cliente y productos
    - Validación de stock en el orden de los items
    - Precio unitario tomado de BD al momento de la venta
    - Total calculado por el servidor
    - Actualización de inventario en la misma transacción
    """
    service = SalesService(db)
    return await service.register_sale(sale_request)

@router.get("", response_model=SaleListResponse)
async def list_sales(db: Session = Depends(get_db)):
    """Listar ventas con cliente, items y productos"""
    service = SalesService(db)
    return await service.list_sales()

@router.get("/health", response_model=HealthResponse)
async def sales_health():
    """Health check del módulo de ventas"""
    return HealthResponse(
        service="sales",
        status="healthy",
        version="1.0.0",
        details={
            "features": [
                "Registro de ventas atómico",
                "Validación de stock con bloqueo por producto",
                "Precio congelado por item"
            ]
        }
    )

@router.get(
    "/{sale_id}",
    response_model=SaleResponse,
    responses={404: {"model": ErrorResponse}}
)
async def get_sale(
    sale_id: int = Path(..., gt=0, le=MAX_DB_INTEGER),
    db: Session = Depends(get_db)
):
    """Obtener una venta por ID"""
    service = SalesService(db)
    return await service.get_sale(sale_id)
