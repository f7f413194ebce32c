# chaininfo/core/interfaces/i_chain_store.py

from abc import ABC, abstractmethod
from typing import Optional

from chaininfo.core.models.block_header import BlockHeader
from chaininfo.core.models.block import Block

class IChainStore(ABC):
    """
    Contrato de lectura de la cadena que consume el BlockResolver.
    Cualquier garantía de consistencia (p.ej. que la punta no cambie
    durante una consulta) es responsabilidad de la implementación.
    """

    @property
    @abstractmethod
    def genesis_sequence(self) -> int:
        """Secuencia del bloque génesis. Piso para alturas normalizadas."""
        pass

    @abstractmethod
    def head_header(self) -> BlockHeader:
        """
        Retorna el header de la punta actual de la cadena.

        Raises:
            EmptyChainError: Si no hay ningún bloque persistido.
        """
        pass

    @abstractmethod
    def get_header_by_hash(self, block_hash: bytes) -> Optional[BlockHeader]:
        pass

    @abstractmethod
    def get_header_by_sequence(self, sequence: int) -> Optional[BlockHeader]:
        pass

    @abstractmethod
    def get_block_by_header(self, header: BlockHeader) -> Optional[Block]:
        """Retorna el bloque completo, o None si falta el cuerpo."""
        pass
