from typing import List, Dict, Any, Tuple
from decimal import Decimal
from sqlalchemy.orm import Session
import logging

from app.core.exceptions import ProductNotFoundError, InsufficientStockError
from app.shared.database.models import Product

logger = logging.getLogger(__name__)

class InventoryService:
    """Servicio para operaciones de inventario"""

    @staticmethod
    def lock_products(db: Session, product_ids: List[int]) -> Dict[int, Product]:
        """
        Bloquear los productos pedidos con SELECT FOR UPDATE.

        Los bloqueos se toman en orden ascendente de id para que dos ventas
        con productos en común no se bloqueen mutuamente. En SQLite el
        FOR UPDATE no existe y se omite; ahí la protección es el UPDATE
        condicional de decrement_stock.
        """
        ids = sorted(set(product_ids))
        if not ids:
            return {}

        products = db.query(Product).filter(
            Product.id.in_(ids)
        ).order_by(Product.id).with_for_update().populate_existing().all()

        return {product.id: product for product in products}

    @staticmethod
    def validate_and_reserve_stock(
        db: Session,
        items: List[Dict[str, Any]]
    ) -> List[Tuple[Product, int]]:
        """
        Validar stock de todos los items en el orden recibido.

        El primer item inválido determina el error reportado. Si un producto
        aparece varias veces, cada línea consume del stock que dejaron las
        anteriores.

        Args:
            db: Sesión de base de datos
            items: Items a validar [{product_id, quantity}]

        Returns:
            List[(Product, quantity)]: Una entrada por item, en el mismo orden

        Raises:
            ProductNotFoundError: Si un producto no existe
            InsufficientStockError: Si no alcanza el stock
        """
        locked = InventoryService.lock_products(db, [item['product_id'] for item in items])

        remaining = {product_id: product.stock_quantity for product_id, product in locked.items()}
        reserved = []

        for item in items:
            product = locked.get(item['product_id'])
            if product is None:
                raise ProductNotFoundError(item['product_id'])

            available = remaining[product.id]
            if available < item['quantity']:
                raise InsufficientStockError(
                    product_id=product.id,
                    product_name=product.name,
                    requested=item['quantity'],
                    available=available
                )

            remaining[product.id] = available - item['quantity']
            reserved.append((product, item['quantity']))

        return reserved

    @staticmethod
    def decrement_stock(db: Session, product_id: int, quantity: int) -> None:
        """
        Descontar stock con un UPDATE condicional atómico.

        UPDATE products SET stock_quantity = stock_quantity - :q
        WHERE id = :id AND stock_quantity >= :q

        Si ninguna fila se actualiza, otra venta consumió el stock entre la
        validación y este punto.
        """
        updated = db.query(Product).filter(
            Product.id == product_id,
            Product.stock_quantity >= quantity
        ).update(
            {Product.stock_quantity: Product.stock_quantity - quantity},
            synchronize_session=False
        )

        if updated != 1:
            current = db.query(Product.name, Product.stock_quantity).filter(
                Product.id == product_id
            ).first()
            if current is None:
                raise ProductNotFoundError(product_id)
            logger.warning(
                f"Stock de producto {product_id} cambió durante la venta "
                f"(disponible: {current.stock_quantity}, necesario: {quantity})"
            )
            raise InsufficientStockError(
                product_id=product_id,
                product_name=current.name,
                requested=quantity,
                available=current.stock_quantity
            )

    @staticmethod
    def apply_reserved_stock(db: Session, reserved: List[Tuple[Product, int]]) -> None:
        """
        Descontar el stock reservado, un UPDATE por producto en orden de id.
        """
        totals: Dict[int, int] = {}
        for product, quantity in reserved:
            totals[product.id] = totals.get(product.id, 0) + quantity

        for product_id in sorted(totals):
            InventoryService.decrement_stock(db, product_id, totals[product_id])

    @staticmethod
    def calculate_subtotal(unit_price: Decimal, quantity: int) -> Decimal:
        return Decimal(unit_price) * quantity
