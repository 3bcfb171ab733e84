# app/shared/database/models.py
from sqlalchemy import (
    Column, Integer, String, DateTime, Numeric, ForeignKey,
    CheckConstraint, func
)
from sqlalchemy.orm import relationship

from app.config.database import Base

# =====================================================
# MIXIN PARA TIMESTAMPS
# =====================================================
class TimestampMixin:
    """Mixin que agrega campos created_at y updated_at"""
    created_at = Column(DateTime, nullable=False, server_default=func.current_timestamp())
    updated_at = Column(DateTime, nullable=False, server_default=func.current_timestamp(), onupdate=func.current_timestamp())


# =====================================================
# CLIENTES Y PRODUCTOS
# =====================================================

class Customer(Base, TimestampMixin):
    """Modelo de Cliente"""
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    tax_id = Column(String(50), nullable=False)

    # Relationships
    sales = relationship("Sale", back_populates="customer")


class Product(Base, TimestampMixin):
    """Modelo de Producto"""
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    description = Column(String(255))
    unit_price = Column(Numeric(10, 2), nullable=False)
    stock_quantity = Column(Integer, nullable=False, default=0)

    __table_args__ = (
        CheckConstraint('unit_price >= 0', name='ck_products_unit_price_non_negative'),
        CheckConstraint('stock_quantity >= 0', name='ck_products_stock_non_negative'),
    )

    # Relationships
    sale_items = relationship("SaleItem", back_populates="product")


# =====================================================
# VENTAS
# =====================================================

class Sale(Base):
    """Modelo de Venta"""
    __tablename__ = "sales"

    id = Column(Integer, primary_key=True, index=True)
    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False, index=True)
    total_amount = Column(Numeric(12, 2), nullable=False)
    sale_date = Column(DateTime, nullable=False, server_default=func.current_timestamp())

    __table_args__ = (
        CheckConstraint('total_amount >= 0', name='ck_sales_total_non_negative'),
    )

    # Relationships
    customer = relationship("Customer", back_populates="sales")
    items = relationship(
        "SaleItem",
        back_populates="sale",
        cascade="all, delete-orphan",
        order_by="SaleItem.id"
    )


class SaleItem(Base):
    """Modelo de Item de Venta (tabla pivote Sale <-> Product)"""
    __tablename__ = "sale_items"

    id = Column(Integer, primary_key=True, index=True)
    sale_id = Column(Integer, ForeignKey("sales.id", ondelete="CASCADE"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    quantity = Column(Integer, nullable=False)
    # Precio congelado al momento de la venta
    unit_price = Column(Numeric(10, 2), nullable=False)
    subtotal = Column(Numeric(12, 2), nullable=False)

    __table_args__ = (
        CheckConstraint('quantity > 0', name='ck_sale_items_quantity_positive'),
    )

    # Relationships
    sale = relationship("Sale", back_populates="items")
    product = relationship("Product", back_populates="sale_items")
