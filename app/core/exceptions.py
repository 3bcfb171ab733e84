# app/core/exceptions.py
"""
Errores de dominio expuestos por la API.

Todos extienden HTTPException para que el router y los handlers de FastAPI
los traduzcan directamente al status correcto. El detail siempre es un dict
con error_code, message y los campos de contexto de cada error.
"""
from fastapi import HTTPException, status


class DomainError(HTTPException):
    error_code = "DOMAIN_ERROR"

    def __init__(self, status_code: int, message: str, **context):
        self.message = message
        self.context = context
        super().__init__(
            status_code=status_code,
            detail={"error_code": self.error_code, "message": message, **context}
        )


# ==================== ERRORES DE CLIENTE ====================

class CustomerNotFoundError(DomainError):
    error_code = "CUSTOMER_NOT_FOUND"

    def __init__(self, customer_id: int):
        self.customer_id = customer_id
        super().__init__(
            status.HTTP_404_NOT_FOUND,
            f"Cliente {customer_id} no encontrado",
            customer_id=customer_id
        )


class ProductNotFoundError(DomainError):
    error_code = "PRODUCT_NOT_FOUND"

    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(
            status.HTTP_404_NOT_FOUND,
            f"Producto {product_id} no encontrado",
            product_id=product_id
        )


class SaleNotFoundError(DomainError):
    error_code = "SALE_NOT_FOUND"

    def __init__(self, sale_id: int):
        self.sale_id = sale_id
        super().__init__(
            status.HTTP_404_NOT_FOUND,
            f"Venta {sale_id} no encontrada",
            sale_id=sale_id
        )


class DuplicateCustomerError(DomainError):
    error_code = "DUPLICATE_CUSTOMER"

    def __init__(self, email: str):
        self.email = email
        super().__init__(
            status.HTTP_409_CONFLICT,
            f"Ya existe un cliente con el email {email}",
            email=email
        )


# ==================== REGLAS DE NEGOCIO ====================

class InsufficientStockError(DomainError):
    error_code = "INSUFFICIENT_STOCK"

    def __init__(self, product_id: int, product_name: str, requested: int, available: int):
        self.product_id = product_id
        self.product_name = product_name
        self.requested = requested
        self.available = available
        super().__init__(
            status.HTTP_400_BAD_REQUEST,
            f"Stock insuficiente para {product_name} "
            f"(solicitado: {requested}, disponible: {available})",
            product_id=product_id,
            product_name=product_name,
            requested=requested,
            available=available
        )


# ==================== PERSISTENCIA ====================

class PersistenceError(DomainError):
    """Falla de almacenamiento. Nunca expone el detalle interno al cliente."""
    error_code = "PERSISTENCE_ERROR"

    def __init__(self, message: str = "Error procesando la solicitud"):
        super().__init__(status.HTTP_500_INTERNAL_SERVER_ERROR, message)
