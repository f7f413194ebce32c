# chaininfo/core/models/blockchain.py

import logging
from typing import List, Optional, Any

from chaininfo.core.exceptions import EmptyChainError
from chaininfo.core.interfaces.i_chain_store import IChainStore
from chaininfo.core.interfaces.i_repository import IBlockchainRepository
from chaininfo.core.models.block import Block
from chaininfo.core.models.block_header import BlockHeader

logger = logging.getLogger(__name__)

class Blockchain(IChainStore):
    """Vista de solo lectura de la cadena sobre un repositorio de datos crudos."""

    def __init__(self, repository: IBlockchainRepository, genesis_sequence: int):
        self._repository = repository
        self._genesis_sequence = genesis_sequence
        logger.info(f"🚀 Cadena abierta. Bloques persistidos: {len(self)}")

    @property
    def genesis_sequence(self) -> int:
        return self._genesis_sequence

    def head_header(self) -> BlockHeader:
        data: Any = self._repository.get_last_header()
        if not data:
            raise EmptyChainError()
        return BlockHeader.from_dict(data)

    def get_header_by_hash(self, block_hash: bytes) -> Optional[BlockHeader]:
        data = self._repository.get_header_by_hash(block_hash.hex())
        return BlockHeader.from_dict(data) if data else None

    def get_header_by_sequence(self, sequence: int) -> Optional[BlockHeader]:
        data = self._repository.get_header_by_height(sequence)
        return BlockHeader.from_dict(data) if data else None

    def get_block_by_header(self, header: BlockHeader) -> Optional[Block]:
        body = self._repository.get_block_body(header.hash.hex())
        if body is None:
            return None
        return Block(header=header, miners_fee=int(body.get('miners_fee', 0)), transactions=list(body.get('transactions', [])))

    # --- Escritura (importación de bloques) ---

    def add_block(self, block: Block) -> bool:
        return self._repository.save_block(block.to_dict())

    def import_blocks(self, blocks: List[Block]) -> None:
        self._repository.save_blocks_atomic([b.to_dict() for b in blocks])
        logger.info(f"📥 {len(blocks)} bloques importados.")

    def __len__(self) -> int:
        return self._repository.count()
