# app/modules/customers/router.py
from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from app.config.database import get_db
from app.shared.schemas.common import ErrorResponse, MAX_DB_INTEGER
from .service import CustomersService
from .schemas import CustomerCreateRequest, CustomerResponse, CustomerListResponse

router = APIRouter()

@router.post(
    "",
    response_model=CustomerResponse,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse, "description": "Email ya registrado"}}
)
async def create_customer(
    customer_request: CustomerCreateRequest,
    db: Session = Depends(get_db)
):
    """Registrar un cliente (nombre, email, documento fiscal)"""
    service = CustomersService(db)
    return await service.create_customer(customer_request)

@router.get("", response_model=CustomerListResponse)
async def list_customers(db: Session = Depends(get_db)):
    """Listar clientes"""
    service = CustomersService(db)
    return await service.list_customers()

@router.get(
    "/{customer_id}",
    response_model=CustomerResponse,
    responses={404: {"model": ErrorResponse}}
)
async def get_customer(
    customer_id: int = Path(..., gt=0, le=MAX_DB_INTEGER),
    db: Session = Depends(get_db)
):
    """Obtener un cliente por ID"""
    service = CustomersService(db)
    return await service.get_customer(customer_id)
