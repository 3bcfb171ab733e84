# app/modules/customers/repository.py
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
from typing import List, Dict, Any, Optional

from app.shared.database.models import Customer
from app.core.exceptions import DuplicateCustomerError


def _is_duplicate_email(error: IntegrityError) -> bool:
    """UNIQUE sobre customers.email (SQLite) o ix_customers_email (PostgreSQL)"""
    message = str(error.orig).lower()
    return ("unique" in message or "duplicate key" in message) and "email" in message


class CustomersRepository:
    def __init__(self, db: Session):
        self.db = db

    def create_customer(self, customer_data: Dict[str, Any]) -> Customer:
        """Crear nuevo cliente"""
        customer = Customer(
            name=customer_data['name'],
            email=customer_data['email'],
            tax_id=customer_data['tax_id']
        )

        self.db.add(customer)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if _is_duplicate_email(e):
                raise DuplicateCustomerError(customer_data['email']) from e
            raise
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(customer)
        return customer

    def get_customer(self, customer_id: int) -> Optional[Customer]:
        return self.db.get(Customer, customer_id)

    def get_customer_by_email(self, email: str) -> Optional[Customer]:
        return self.db.query(Customer).filter(Customer.email == email).first()

    def get_all_customers(self) -> List[Customer]:
        return self.db.query(Customer).order_by(Customer.id).all()
