# app/modules/customers/service.py
from fastapi import HTTPException
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
import logging

from .repository import CustomersRepository
from .schemas import CustomerCreateRequest, CustomerResponse, CustomerListResponse, CustomerInfo
from app.core.exceptions import CustomerNotFoundError, DuplicateCustomerError, PersistenceError

logger = logging.getLogger(__name__)

class CustomersService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = CustomersRepository(db)

    async def create_customer(self, customer_data: CustomerCreateRequest) -> CustomerResponse:
        """Crear cliente validando email único"""
        try:
            if self.repository.get_customer_by_email(customer_data.email):
                raise DuplicateCustomerError(customer_data.email)

            customer = self.repository.create_customer(customer_data.model_dump())
            logger.info(f"Cliente {customer.id} creado")

            return CustomerResponse(
                success=True,
                message="Cliente registrado exitosamente",
                customer=CustomerInfo.model_validate(customer)
            )

        except HTTPException:
            raise
        except SQLAlchemyError as e:
            logger.exception("Error creando cliente")
            raise PersistenceError("Error registrando cliente") from e

    async def get_customer(self, customer_id: int) -> CustomerResponse:
        customer = self.repository.get_customer(customer_id)
        if customer is None:
            raise CustomerNotFoundError(customer_id)

        return CustomerResponse(
            success=True,
            message=f"Cliente #{customer.id}",
            customer=CustomerInfo.model_validate(customer)
        )

    async def list_customers(self) -> CustomerListResponse:
        customers = self.repository.get_all_customers()
        return CustomerListResponse(
            success=True,
            message=f"{len(customers)} clientes registrados",
            customers=[CustomerInfo.model_validate(c) for c in customers],
            count=len(customers)
        )
