# chaininfo/tests/mocks/chain_fixtures.py
'''
Cadenas de prueba en memoria.

    block_hash(seq): Hash determinista para la secuencia 'seq'.
    make_block(seq, fee): Bloque con header encadenado y fee del minero dado.
    build_memory_chain(head, genesis): Cadena completa genesis..head sobre MemoryBlockchainRepository.
'''

import hashlib
from typing import Optional, Tuple

from chaininfo.core.models.block import Block
from chaininfo.core.models.block_header import BlockHeader
from chaininfo.core.models.blockchain import Blockchain
from chaininfo.infra.persistence.memory.memory_repository import MemoryBlockchainRepository

GENESIS_TIMESTAMP_MS = 1_681_000_000_000
BLOCK_TIME_MS = 60_000
TEST_BITS = "1d00ffff"
TEST_DIFFICULTY = "4295032833"  # 2**256 // (0xffff << 208)

def block_hash(seq: int) -> bytes:
    return hashlib.sha256(f"block-{seq}".encode()).digest()

def fee_for(seq: int) -> int:
    # Alterna signo: los pares se guardan negativos
    return -(seq * 10) if seq % 2 == 0 else seq * 10

def make_block(seq: int, fee: Optional[int] = None) -> Block:
    header = BlockHeader(
        sequence=seq,
        block_hash=block_hash(seq),
        previous_hash=block_hash(seq - 1) if seq > 1 else b"\x00" * 32,
        timestamp=GENESIS_TIMESTAMP_MS + seq * BLOCK_TIME_MS,
        bits=TEST_BITS
    )
    return Block(header, fee_for(seq) if fee is None else fee, [f"tx_{seq}_0"])

def build_memory_chain(head: int = 100, genesis: int = 1) -> Tuple[Blockchain, MemoryBlockchainRepository]:
    repo = MemoryBlockchainRepository()
    chain = Blockchain(repo, genesis_sequence=genesis)
    chain.import_blocks([make_block(seq) for seq in range(genesis, head + 1)])
    return chain, repo
