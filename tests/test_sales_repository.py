from decimal import Decimal

import pytest

from app.core.exceptions import (
    CustomerNotFoundError, ProductNotFoundError, InsufficientStockError
)
from app.modules.sales.repository import SalesRepository
from app.shared.database.models import Product, Sale, SaleItem
from app.shared.services.inventory_service import InventoryService


def test_create_sale_atomic_persists_sale_items_and_stock(db, customer, p1, p2, read_stock):
    repository = SalesRepository(db)

    sale_id = repository.create_sale_atomic(customer.id, [
        {"product_id": p1.id, "quantity": 2},
        {"product_id": p2.id, "quantity": 1}
    ])
    sale = repository.get_sale(sale_id)

    assert sale.total_amount == Decimal("40.00")
    assert sale.customer.id == customer.id
    assert [(i.product_id, i.quantity, i.unit_price) for i in sale.items] == [
        (p1.id, 2, Decimal("10.00")),
        (p2.id, 1, Decimal("20.00"))
    ]
    assert sale.sale_date is not None
    assert read_stock(p1.id) == 3
    assert read_stock(p2.id) == 1


def test_repeated_product_lines_consume_cumulative_stock(db, customer, p1, read_stock):
    repository = SalesRepository(db)

    with pytest.raises(InsufficientStockError) as exc_info:
        repository.create_sale_atomic(customer.id, [
            {"product_id": p1.id, "quantity": 3},
            {"product_id": p1.id, "quantity": 3}
        ])

    assert exc_info.value.requested == 3
    assert exc_info.value.available == 2
    assert read_stock(p1.id) == 5

    sale = repository.get_sale(repository.create_sale_atomic(customer.id, [
        {"product_id": p1.id, "quantity": 3},
        {"product_id": p1.id, "quantity": 2}
    ]))

    assert len(sale.items) == 2
    assert sale.total_amount == Decimal("50.00")
    assert read_stock(p1.id) == 0


def test_first_failing_item_in_request_order_is_reported(db, customer, make_product):
    sold_out = make_product("Agotado", "1.00", 0)
    repository = SalesRepository(db)

    with pytest.raises(ProductNotFoundError) as exc_info:
        repository.create_sale_atomic(customer.id, [
            {"product_id": 777, "quantity": 1},
            {"product_id": sold_out.id, "quantity": 1}
        ])
    assert exc_info.value.product_id == 777

    with pytest.raises(InsufficientStockError) as exc_info:
        repository.create_sale_atomic(customer.id, [
            {"product_id": sold_out.id, "quantity": 1},
            {"product_id": 777, "quantity": 1}
        ])
    assert exc_info.value.product_id == sold_out.id


def test_missing_customer_is_rejected_before_touching_stock(db, p1, read_stock):
    repository = SalesRepository(db)

    with pytest.raises(CustomerNotFoundError):
        repository.create_sale_atomic(404, [{"product_id": p1.id, "quantity": 1}])

    assert read_stock(p1.id) == 5
    assert db.query(Sale).count() == 0


def test_stock_taken_by_another_sale_after_validation(db, session_factory, customer, p1, monkeypatch, read_stock):
    """El UPDATE condicional detecta stock consumido entre validación y descuento"""
    original = InventoryService.validate_and_reserve_stock

    def validate_then_concurrent_sale(session, items):
        reserved = original(session, items)
        other = session_factory()
        try:
            other.get(Product, p1.id).stock_quantity = 1
            other.commit()
        finally:
            other.close()
        return reserved

    monkeypatch.setattr(
        InventoryService, "validate_and_reserve_stock", staticmethod(validate_then_concurrent_sale)
    )

    with pytest.raises(InsufficientStockError) as exc_info:
        SalesRepository(db).create_sale_atomic(customer.id, [{"product_id": p1.id, "quantity": 4}])

    assert exc_info.value.available == 1
    assert read_stock(p1.id) == 1
    assert db.query(Sale).count() == 0
    assert db.query(SaleItem).count() == 0


def test_get_all_sales_ordered_by_id(db, customer, p1):
    repository = SalesRepository(db)
    first = repository.create_sale_atomic(customer.id, [{"product_id": p1.id, "quantity": 1}])
    second = repository.create_sale_atomic(customer.id, [{"product_id": p1.id, "quantity": 1}])

    assert [s.id for s in repository.get_all_sales()] == [first, second]
    assert repository.get_sale(999) is None
