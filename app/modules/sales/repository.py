from sqlalchemy.orm import Session, selectinload
from typing import Dict, Any, List, Optional
from decimal import Decimal
from fastapi import HTTPException
from sqlalchemy.exc import SQLAlchemyError
import logging

from app.shared.database.models import Customer, Sale, SaleItem
from app.shared.services.inventory_service import InventoryService
from app.core.exceptions import CustomerNotFoundError

logger = logging.getLogger(__name__)

class SalesRepository:
    def __init__(self, db: Session):
        self.db = db
        self.inventory_service = InventoryService()

    def create_sale_atomic(self, customer_id: int, items: List[Dict[str, Any]]) -> int:
        """
        Crear venta con actualización de inventario en transacción atómica.

        Proceso:
        1. Validar cliente
        2. Bloquear productos y validar stock (orden de los items)
        3. Construir Sale + SaleItems en memoria con el total calculado
        4. Descontar stock con UPDATE condicional (orden de id)
        5. Commit único

        Cualquier error deshace todo: no queda venta, ni items, ni cambios de stock.

        Returns:
            int: ID de la venta confirmada

        Raises:
            HTTPException: Errores de negocio (cliente/producto inexistente, stock)
            SQLAlchemyError: Si falla la transacción
        """
        try:
            # PASO 1: VALIDAR CLIENTE
            customer = self.db.get(Customer, customer_id)
            if customer is None:
                raise CustomerNotFoundError(customer_id)

            # PASO 2: VALIDAR Y RESERVAR stock (SELECT FOR UPDATE)
            logger.info(f"Reservando stock para {len(items)} items")
            reserved = self.inventory_service.validate_and_reserve_stock(self.db, items)

            # PASO 3: CONSTRUIR VENTA con precios REALES de BD
            sale_items = []
            total = Decimal("0")
            for product, quantity in reserved:
                subtotal = self.inventory_service.calculate_subtotal(product.unit_price, quantity)
                sale_items.append(SaleItem(
                    product_id=product.id,
                    quantity=quantity,
                    unit_price=product.unit_price,
                    subtotal=subtotal
                ))
                total += subtotal

            sale = Sale(customer_id=customer.id, total_amount=total, items=sale_items)

            # PASO 4: ACTUALIZAR INVENTARIO
            self.inventory_service.apply_reserved_stock(self.db, reserved)

            # PASO 5: COMMIT ÚNICO
            self.db.add(sale)
            self.db.flush()
            sale_id = sale.id
            self.db.commit()
            logger.info(f"Transacción completada - Venta #{sale_id} por {total}")

        except HTTPException as e:
            logger.warning(f"Venta rechazada: {e.detail}")
            self.db.rollback()
            raise
        except SQLAlchemyError:
            logger.exception("Error en transacción de venta")
            self.db.rollback()
            raise

        return sale_id

    def _sales_query(self):
        return self.db.query(Sale).options(
            selectinload(Sale.customer),
            selectinload(Sale.items).selectinload(SaleItem.product)
        )

    def get_sale(self, sale_id: int) -> Optional[Sale]:
        """Obtener venta con cliente e items/producto"""
        return self._sales_query().filter(Sale.id == sale_id).first()

    def get_all_sales(self) -> List[Sale]:
        """Obtener todas las ventas con cliente e items/producto"""
        return self._sales_query().order_by(Sale.id).all()
