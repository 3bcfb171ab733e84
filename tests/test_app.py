from fastapi.testclient import TestClient
from sqlalchemy import inspect
from sqlalchemy.orm import sessionmaker

from app.config.database import build_engine, init_db
from app.main import app
from app.shared.database.models import Customer


def test_init_db_keeps_existing_rows(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'restart.sqlite'}")
    init_db(bind=engine)

    assert set(inspect(engine).get_table_names()) == {
        "customers", "products", "sales", "sale_items"
    }

    Session = sessionmaker(bind=engine)
    session = Session()
    session.add(Customer(name="Persistente", email="p@example.com", tax_id="1"))
    session.commit()
    session.close()

    # Segundo arranque
    init_db(bind=engine)

    session = Session()
    assert session.query(Customer).count() == 1
    session.close()
    engine.dispose()


def test_root_and_health(client):
    root = client.get("/")
    health = client.get("/health")

    assert root.status_code == 200
    assert root.json()["api"] == "/api/v1"
    assert health.json()["status"] == "healthy"


def test_unhandled_error_returns_generic_500(client, monkeypatch):
    from app.modules.customers.repository import CustomersRepository

    def broken(self):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(CustomersRepository, "get_all_customers", broken)

    response = TestClient(app, raise_server_exceptions=False).get("/api/v1/customers")

    assert response.status_code == 500
    assert response.json()["detail"]["error_code"] == "INTERNAL_ERROR"
    assert "disk" not in response.text
