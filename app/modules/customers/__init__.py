# app/modules/customers/__init__.py
"""
Módulo de Clientes

- Registro de clientes (email único)
- Consulta de clientes

Arquitectura:
- router.py: Endpoints de clientes
- service.py: Lógica de negocio de clientes
- repository.py: Acceso a datos de clientes
- schemas.py: Modelos de request/response
"""

from .router import router
from .service import CustomersService
from .repository import CustomersRepository

__all__ = [
    "router",
    "CustomersService",
    "CustomersRepository"
]
