# chaininfo/infra/persistence/repository_factory.py

import logging
from chaininfo.core.interfaces.i_repository import IBlockchainRepository
from chaininfo.core.config.config_manager import ConfigManager
from chaininfo.core.models.blockchain import Blockchain

from chaininfo.infra.persistence.sqlite.sqlite_blockchain_repository import SqliteBlockchainRepository
from chaininfo.infra.persistence.memory.memory_repository import MemoryBlockchainRepository

logger = logging.getLogger(__name__)

class RepositoryFactory:

    @staticmethod
    def get_blockchain_repository() -> IBlockchainRepository:
        config = ConfigManager()
        storage_type = config.persistence.storage_engine.lower()

        logger.info(f"🏗️  Blockchain DB: {storage_type.upper()}")

        if storage_type == "sqlite":
            return SqliteBlockchainRepository()
        elif storage_type == "memory":
            return MemoryBlockchainRepository()
        else:
            error_msg = f"Motor '{storage_type}' no soportado para Blockchain."
            logger.error(f"❌ {error_msg}")
            raise ValueError(error_msg)

    @staticmethod
    def create_chain_store() -> Blockchain:
        """Arma la cadena de solo lectura sobre el repositorio configurado."""
        config = ConfigManager()
        return Blockchain(RepositoryFactory.get_blockchain_repository(), config.genesis_sequence)
