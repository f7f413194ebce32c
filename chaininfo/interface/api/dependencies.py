# chaininfo/interface/api/dependencies.py
import logging
from typing import TYPE_CHECKING

from fastapi import Request

if TYPE_CHECKING:
    from chaininfo.interface.api.server import BlockInfoService

logger = logging.getLogger(__name__)

def get_block_service(request: Request) -> 'BlockInfoService':
    """
    Inyector del servicio de bloques.
    El servicio vive en 'app.state', armado por create_app() o por el lifespan.
    """
    service = getattr(request.app.state, "block_service", None)
    if service is None:
        logger.critical("🚨 ERROR DE ARRANQUE: El servicio de bloques no ha sido inicializado.")
        raise RuntimeError("El servicio de bloques no ha sido inicializado.")
    return service
