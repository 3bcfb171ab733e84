"""Ventas concurrentes contra el mismo producto: el stock nunca queda negativo."""
import asyncio
from concurrent.futures import ThreadPoolExecutor

from app.core.exceptions import InsufficientStockError
from app.modules.sales.schemas import SaleCreateRequest
from app.modules.sales.service import SalesService
from app.shared.database.models import Sale


def test_concurrent_sales_never_oversell(session_factory, customer, make_product, read_stock):
    product = make_product("Limitado", "15.00", 5)
    customer_id, product_id = customer.id, product.id

    def buy_one(_):
        session = session_factory()
        try:
            service = SalesService(session)
            service.max_retries = 50
            service.retry_backoff = 0.01
            request = SaleCreateRequest(
                customer_id=customer_id,
                items=[{"product_id": product_id, "quantity": 1}]
            )
            asyncio.run(service.register_sale(request))
            return "ok"
        except InsufficientStockError:
            return "rejected"
        finally:
            session.close()

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(buy_one, range(8)))

    assert results.count("ok") == 5
    assert results.count("rejected") == 3
    assert read_stock(product_id) == 0

    session = session_factory()
    try:
        assert session.query(Sale).count() == 5
    finally:
        session.close()


def test_overlapping_multi_item_sales(session_factory, customer, make_product, read_stock):
    a = make_product("A", "1.00", 6)
    b = make_product("B", "2.00", 6)
    customer_id, a_id, b_id = customer.id, a.id, b.id

    def buy(index):
        # Orden de items invertido entre hilos pares e impares
        items = [(a_id, 1), (b_id, 1)] if index % 2 else [(b_id, 1), (a_id, 1)]
        session = session_factory()
        try:
            service = SalesService(session)
            service.max_retries = 50
            service.retry_backoff = 0.01
            request = SaleCreateRequest(
                customer_id=customer_id,
                items=[{"product_id": pid, "quantity": qty} for pid, qty in items]
            )
            asyncio.run(service.register_sale(request))
            return True
        except InsufficientStockError:
            return False
        finally:
            session.close()

    with ThreadPoolExecutor(max_workers=6) as pool:
        results = list(pool.map(buy, range(10)))

    assert results.count(True) == 6
    assert read_stock(a_id) == 0
    assert read_stock(b_id) == 0
