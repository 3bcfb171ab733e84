# app/modules/sales/__init__.py
"""
Módulo de Ventas - Registro de Ventas con Inventario

Este módulo maneja el ciclo de ventas:
- Registro de ventas con múltiples items
- Validación y descuento de stock en una sola transacción
- Consulta de ventas con cliente e items

Arquitectura:
- router.py: Endpoints de ventas
- service.py: Lógica de negocio y reintentos
- repository.py: Transacción atómica y consultas
- schemas.py: Modelos de request/response
"""

from .router import router
from .service import SalesService
from .repository import SalesRepository

__all__ = [
    "router",
    "SalesService",
    "SalesRepository"
]
