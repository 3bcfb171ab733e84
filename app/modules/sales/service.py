# app/modules/sales/service.py
from fastapi import HTTPException
from sqlalchemy.orm import Session
from sqlalchemy.exc import OperationalError, SQLAlchemyError
import asyncio
import logging

from .repository import SalesRepository
from .schemas import SaleCreateRequest, SaleResponse, SaleListResponse, SaleDetail
from app.config.settings import settings
from app.core.exceptions import SaleNotFoundError, PersistenceError
from app.shared.database.models import Sale


logger = logging.getLogger(__name__)

class SalesService:
    def __init__(self, db: Session):
        self.db = db
        self.repository = SalesRepository(db)
        self.max_retries = max(1, settings.sale_max_retries)
        self.retry_backoff = settings.sale_retry_backoff_seconds

    async def register_sale(self, sale_data: SaleCreateRequest) -> SaleResponse:
        """
        Registrar venta completa.

        Responsabilidades:
        - Delegar la transacción atómica al repository
        - Reintentar fallas transitorias de BD (bloqueos, deadlocks)
        - Nunca reintentar errores de negocio (stock, inexistentes)
        - Construir respuesta
        """
        items = [item.model_dump() for item in sale_data.items]
        logger.info(
            f"Iniciando venta - Cliente: {sale_data.customer_id}, Items: {len(items)}"
        )

        sale_id = await self._commit_sale_with_retry(sale_data.customer_id, items)
        logger.info(f"Venta {sale_id} completada exitosamente")

        # La venta ya está confirmada: una falla al releerla no reintenta la escritura
        try:
            sale = self.repository.get_sale(sale_id)
        except SQLAlchemyError as e:
            logger.exception(f"Venta {sale_id} registrada pero no se pudo releer")
            raise PersistenceError("Error procesando venta") from e

        return self._build_response(sale, "Venta registrada exitosamente")

    async def _commit_sale_with_retry(self, customer_id: int, items: list) -> int:
        """Ejecutar la transacción de venta, reintentando solo fallas transitorias"""
        for attempt in range(1, self.max_retries + 1):
            try:
                return self.repository.create_sale_atomic(customer_id, items)

            except HTTPException:
                raise
            except OperationalError as e:
                if attempt < self.max_retries:
                    logger.warning(
                        f"Falla transitoria registrando venta (intento {attempt}/{self.max_retries}): {e}"
                    )
                    await asyncio.sleep(self.retry_backoff * attempt)
                    continue
                logger.error(f"Venta abortada tras {attempt} intentos")
                raise PersistenceError("Error procesando venta") from e
            except SQLAlchemyError as e:
                raise PersistenceError("Error procesando venta") from e

    async def get_sale(self, sale_id: int) -> SaleResponse:
        """Obtener una venta con cliente e items"""
        try:
            sale = self.repository.get_sale(sale_id)
        except SQLAlchemyError as e:
            logger.exception(f"Error consultando venta {sale_id}")
            raise PersistenceError("Error consultando venta") from e

        if sale is None:
            raise SaleNotFoundError(sale_id)

        return self._build_response(sale, f"Venta #{sale.id}")

    async def list_sales(self) -> SaleListResponse:
        """Listar todas las ventas con cliente e items"""
        try:
            sales = self.repository.get_all_sales()
        except SQLAlchemyError as e:
            logger.exception("Error listando ventas")
            raise PersistenceError("Error consultando ventas") from e

        return SaleListResponse(
            success=True,
            message=f"{len(sales)} ventas registradas",
            sales=[SaleDetail.model_validate(sale) for sale in sales],
            count=len(sales)
        )

    def _build_response(self, sale: Sale, message: str) -> SaleResponse:
        return SaleResponse(
            success=True,
            message=message,
            sale=SaleDetail.model_validate(sale)
        )
