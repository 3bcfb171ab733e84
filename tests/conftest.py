"""Fixtures compartidos: BD SQLite nueva por test y cliente HTTP."""
import os

# Nunca usar la BD real desde los tests
os.environ.setdefault("DATABASE_URL", "sqlite:///./test_database.sqlite")

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app.config.database import build_engine, init_db, get_db
from app.main import app
from app.shared.database.models import Customer, Product


@pytest.fixture
def engine(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'test.sqlite'}")
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    """TestClient con get_db apuntando a la BD del test"""
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def customer(db):
    customer = Customer(name="Ana Souza", email="ana@example.com", tax_id="123.456.789-00")
    db.add(customer)
    db.commit()
    db.refresh(customer)
    return customer


def _create_product(db, name, price, stock):
    product = Product(
        name=name,
        description=f"Descripción de {name}",
        unit_price=Decimal(price),
        stock_quantity=stock
    )
    db.add(product)
    db.commit()
    db.refresh(product)
    return product


@pytest.fixture
def p1(db):
    return _create_product(db, "P1", "10.00", 5)


@pytest.fixture
def p2(db):
    return _create_product(db, "P2", "20.00", 2)


@pytest.fixture
def make_product(db):
    def factory(name="Producto", price="1.00", stock=0):
        return _create_product(db, name, price, stock)
    return factory


@pytest.fixture
def read_stock(session_factory):
    """Leer stock actual desde una sesión nueva"""
    def reader(product_id):
        session = session_factory()
        try:
            return session.get(Product, product_id).stock_quantity
        finally:
            session.close()
    return reader
