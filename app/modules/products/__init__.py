# app/modules/products/__init__.py
"""
Módulo de Productos - Catálogo e Inventario

- Registro de productos con precio y stock inicial
- Consulta de productos
- Actualización de datos y precio (el stock solo baja con ventas)

Arquitectura:
- router.py: Endpoints de productos
- service.py: Lógica de negocio de productos
- repository.py: Acceso a datos de productos
- schemas.py: Modelos de request/response
"""

from .router import router
from .service import ProductsService
from .repository import ProductsRepository

__all__ = [
    "router",
    "ProductsService",
    "ProductsRepository"
]
