# chaininfo/interface/api/config.py

import os
import logging
from dataclasses import dataclass

from chaininfo.core.config.config_manager import ConfigManager

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class ApiConfig:
    host: str
    port: int
    title: str
    version: str
    debug_mode: bool
    max_blocks_per_request: int
    storage_engine: str

    @classmethod
    def load(cls) -> 'ApiConfig':

        # 1. Infraestructura (entorno)
        host = os.getenv("CHAININFO_API_HOST", "0.0.0.0")
        port = int(os.getenv("CHAININFO_API_PORT", 8020))
        title = os.getenv("CHAININFO_API_TITLE", "Chain Info API")
        version = "0.1.0"
        debug = os.getenv("CHAININFO_DEBUG", "False").lower() == "true"
        max_blocks = int(os.getenv("CHAININFO_MAX_BLOCKS_PER_REQUEST", 1000))

        # 2. Núcleo
        engine = ConfigManager().persistence.storage_engine

        config = cls(
            host=host,
            port=port,
            title=title,
            version=version,
            debug_mode=debug,
            max_blocks_per_request=max_blocks,
            storage_engine=engine
        )

        logger.info("⚙️  Configuración de la API cargada:")
        logger.info(f"   URL: http://{config.host}:{config.port}")
        logger.info(f"   Título: {config.title} v{config.version}")
        logger.debug(f"   Debug: {config.debug_mode} | Max rango: {config.max_blocks_per_request}")

        return config

# Instancia inmutable por defecto
settings = ApiConfig.load()
