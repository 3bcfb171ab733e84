# app/modules/products/service.py
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
import logging

from .repository import ProductsRepository
from .schemas import (
    ProductCreateRequest, ProductUpdateRequest,
    ProductResponse, ProductListResponse, ProductInfo
)
from app.core.exceptions import ProductNotFoundError, PersistenceError

logger = logging.getLogger(__name__)

class ProductsService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = ProductsRepository(db)

    async def create_product(self, product_data: ProductCreateRequest) -> ProductResponse:
        try:
            product = self.repository.create_product(product_data.model_dump())
        except SQLAlchemyError as e:
            logger.exception("Error creando producto")
            raise PersistenceError("Error registrando producto") from e

        logger.info(f"Producto {product.id} creado con stock {product.stock_quantity}")
        return ProductResponse(
            success=True,
            message="Producto registrado exitosamente",
            product=ProductInfo.model_validate(product)
        )

    async def update_product(self, product_id: int, product_data: ProductUpdateRequest) -> ProductResponse:
        """
        Actualizar nombre, descripción o precio.

        Las ventas ya registradas conservan el precio de sus items.
        """
        product = self.repository.get_product(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        changes = product_data.model_dump(exclude_unset=True)
        try:
            product = self.repository.update_product(product, changes)
        except SQLAlchemyError as e:
            logger.exception(f"Error actualizando producto {product_id}")
            raise PersistenceError("Error actualizando producto") from e

        logger.info(f"Producto {product_id} actualizado: {sorted(changes)}")
        return ProductResponse(
            success=True,
            message="Producto actualizado",
            product=ProductInfo.model_validate(product)
        )

    async def get_product(self, product_id: int) -> ProductResponse:
        product = self.repository.get_product(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        return ProductResponse(
            success=True,
            message=f"Producto #{product.id}",
            product=ProductInfo.model_validate(product)
        )

    async def list_products(self) -> ProductListResponse:
        products = self.repository.get_all_products()
        return ProductListResponse(
            success=True,
            message=f"{len(products)} productos registrados",
            products=[ProductInfo.model_validate(p) for p in products],
            count=len(products)
        )
