from abc import ABC, abstractmethod
from typing import Optional, List, Dict, Any

class IBlockchainRepository(ABC):
    """
    Contrato Polimórfico para el almacenamiento de la Blockchain.
    Trabaja con DATOS crudos (Dicts), no con Entidades.
    Headers y cuerpos se guardan por separado: puede existir un header sin cuerpo.
    """

    @abstractmethod
    def save_block(self, block_data: Dict[str, Any]) -> bool:
        """
        Guarda un solo bloque (header + body).
        Retorna: True si quedó persistido (o ya existía).
        """
        pass

    @abstractmethod
    def save_blocks_atomic(self, chain_data: List[Dict[str, Any]]) -> bool:
        """Guarda una lista de bloques en una sola transacción."""
        pass

    @abstractmethod
    def get_header_by_hash(self, block_hash: str) -> Optional[Dict[str, Any]]:
        pass

    @abstractmethod
    def get_header_by_height(self, height: int) -> Optional[Dict[str, Any]]:
        pass

    @abstractmethod
    def get_block_body(self, block_hash: str) -> Optional[Dict[str, Any]]:
        """Recupera el cuerpo ('body') del bloque con ese hash."""
        pass

    @abstractmethod
    def get_last_header(self) -> Optional[Dict[str, Any]]:
        """Header de mayor altura (Tip)."""
        pass

    @abstractmethod
    def count(self) -> int:
        pass
