# chaininfo/core/services/block_resolver.py
'''
class BlockResolver:
    Resuelve identificadores "sueltos" (hash, altura, offset negativo desde la
    punta o texto libre) a un bloque canónico y produce su BlockSummary.

    Methods:
        resolve_one(spec): Un bloque a partir de un IdentifierSpec.
        resolve_latest(): El bloque de la punta actual.
        resolve_range(start_height, count): 'count' bloques consecutivos. Fail-fast.

    No guarda estado entre llamadas ni hace caché: cada consulta vuelve a leer la cadena.
    Los errores se propagan tal cual al llamador; aquí no se registran ni se capturan.
'''

import logging
from typing import List, Optional

from chaininfo.core.exceptions import InconsistentStoreError, InvalidArgumentError
from chaininfo.core.interfaces.i_chain_store import IChainStore
from chaininfo.core.models.block_header import BlockHeader
from chaininfo.core.models.block_summary import BlockSummary
from chaininfo.core.models.identifier_spec import IdentifierSpec, SequenceLookup
from chaininfo.core.utils.difficulty_utils import DifficultyUtils

logger = logging.getLogger(__name__)

def normalize_height(height: int, head_sequence: int, genesis_sequence: int) -> int:
    """-1 es la punta, -2 el anterior, etc. Nunca por debajo del génesis."""
    if height and height < 0:
        return max(head_sequence + height + 1, genesis_sequence)
    return height

def reward_magnitude(miners_fee: int) -> int:
    # El fee del minero puede guardarse negativo; se reporta la magnitud
    return abs(miners_fee)

class BlockResolver:

    def __init__(self, store: IChainStore) -> None:
        self._store = store

    def _normalize(self, height: int) -> int:
        if height and height < 0:
            return normalize_height(height, self._store.head_header().sequence, self._store.genesis_sequence)
        return height

    def resolve_one(self, spec: IdentifierSpec) -> BlockSummary:
        plan = spec.lookups(self._normalize)
        if not plan:
            raise InvalidArgumentError("Expected one of search, hash or a non-zero height")

        header: Optional[BlockHeader] = None
        for lookup in plan:
            header = lookup.fetch(self._store)
            if header is not None:
                break

        if header is None:
            # El mensaje refleja la última búsqueda intentada
            raise plan[-1].not_found()

        return self._summarize(header)

    def resolve_latest(self) -> BlockSummary:
        return self._summarize(self._store.head_header())

    def resolve_range(self, start_height: int, count: int) -> List[BlockSummary]:
        summaries: List[BlockSummary] = []

        for i in range(count):
            # Cada posición se normaliza por separado contra la punta actual
            lookup = SequenceLookup(self._normalize(start_height + i))

            header = lookup.fetch(self._store) if lookup.sequence else None
            if header is None:
                raise lookup.not_found()

            summaries.append(self._summarize(header))

        logger.debug(f"Rango resuelto: {start_height} (+{count})")
        return summaries

    def _summarize(self, header: BlockHeader) -> BlockSummary:
        block = self._store.get_block_by_header(header)
        if block is None:
            raise InconsistentStoreError(header.hash.hex())

        return BlockSummary(
            height=int(header.sequence),
            difficulty=str(DifficultyUtils.target_to_difficulty(header.target)),
            block_hash=header.hash.hex(),
            reward=str(reward_magnitude(block.miners_fee)),
            timestamp=int(header.timestamp)
        )
