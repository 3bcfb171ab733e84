# app/modules/products/repository.py
from sqlalchemy.orm import Session
from typing import List, Dict, Any, Optional

from app.shared.database.models import Product

class ProductsRepository:
    def __init__(self, db: Session):
        self.db = db

    def create_product(self, product_data: Dict[str, Any]) -> Product:
        """Crear nuevo producto"""
        product = Product(
            name=product_data['name'],
            description=product_data.get('description'),
            unit_price=product_data['unit_price'],
            stock_quantity=product_data.get('stock_quantity', 0)
        )

        self.db.add(product)
        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(product)
        return product

    def update_product(self, product: Product, changes: Dict[str, Any]) -> Product:
        """Actualizar campos editables de un producto"""
        for field, value in changes.items():
            setattr(product, field, value)

        try:
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

        self.db.refresh(product)
        return product

    def get_product(self, product_id: int) -> Optional[Product]:
        return self.db.get(Product, product_id)

    def get_all_products(self) -> List[Product]:
        return self.db.query(Product).order_by(Product.id).all()
