# app/api/v1/router.py
from fastapi import APIRouter
from app.modules.customers.router import router as customers_router
from app.modules.products.router import router as products_router
from app.modules.sales.router import router as sales_router


# Crear router principal de la API v1
api_router = APIRouter()

api_router.include_router(
    customers_router,
    prefix="/customers",
    tags=["Customers"]
)

api_router.include_router(
    products_router,
    prefix="/products",
    tags=["Products"]
)

api_router.include_router(
    sales_router,
    prefix="/sales",
    tags=["Sales"]
)
