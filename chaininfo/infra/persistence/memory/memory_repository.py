# chaininfo/infra/persistence/memory/memory_repository.py
import copy
import threading
from typing import Optional, List, Dict, Any

from chaininfo.core.interfaces.i_repository import IBlockchainRepository

class MemoryBlockchainRepository(IBlockchainRepository):
    """
    Implementación volátil en diccionarios.
    Útil para tests y nodos efímeros; se pierde al cerrar el proceso.
    """
    def __init__(self) -> None:
        self._headers_by_height: Dict[int, Dict[str, Any]] = {}
        self._heights_by_hash: Dict[str, int] = {}
        self._bodies: Dict[str, Dict[str, Any]] = {}
        self._lock = threading.Lock()

    def _insert(self, block_data: Dict[str, Any]) -> None:
        header = dict(block_data['header'])
        block_hash = header['hash'].lower()
        height = int(header['sequence'])

        # INSERT OR IGNORE: la primera escritura gana
        if height not in self._headers_by_height and block_hash not in self._heights_by_hash:
            self._headers_by_height[height] = header
            self._heights_by_hash[block_hash] = height

        body = block_data.get('body')
        if body is not None and block_hash not in self._bodies:
            self._bodies[block_hash] = copy.deepcopy(body)

    def save_block(self, block_data: Dict[str, Any]) -> bool:
        if not block_data.get('header'):
            return False
        with self._lock:
            self._insert(block_data)
        return True

    def save_blocks_atomic(self, chain_data: List[Dict[str, Any]]) -> bool:
        with self._lock:
            snapshot = (dict(self._headers_by_height), dict(self._heights_by_hash), dict(self._bodies))
            try:
                for block_data in chain_data:
                    self._insert(block_data)
            except KeyError:
                self._headers_by_height, self._heights_by_hash, self._bodies = snapshot
                raise
        return True

    def get_header_by_hash(self, block_hash: str) -> Optional[Dict[str, Any]]:
        height = self._heights_by_hash.get(block_hash.lower())
        return self.get_header_by_height(height) if height is not None else None

    def get_header_by_height(self, height: int) -> Optional[Dict[str, Any]]:
        header = self._headers_by_height.get(height)
        return dict(header) if header else None

    def get_block_body(self, block_hash: str) -> Optional[Dict[str, Any]]:
        body = self._bodies.get(block_hash.lower())
        return copy.deepcopy(body) if body is not None else None

    def get_last_header(self) -> Optional[Dict[str, Any]]:
        if not self._headers_by_height:
            return None
        return self.get_header_by_height(max(self._headers_by_height))

    def count(self) -> int:
        return len(self._headers_by_height)

    def delete_body(self, block_hash: str) -> None:
        """Elimina el cuerpo de un bloque dejando su header (simula una DB inconsistente)."""
        with self._lock:
            self._bodies.pop(block_hash.lower(), None)
