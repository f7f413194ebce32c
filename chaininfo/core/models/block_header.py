# chaininfo/core/models/block_header.py

from typing import Dict, Any

from chaininfo.core.utils.difficulty_utils import DifficultyUtils

class BlockHeader:

    def __init__(
        self,
        sequence: int,
        block_hash: bytes,
        previous_hash: bytes,
        timestamp: int,
        bits: str
    ) -> None:
        self._sequence = sequence
        self._hash = block_hash
        self._previous_hash = previous_hash
        self._timestamp = timestamp  # epoch en milisegundos
        self._bits = bits

    # --- Getters ---
    @property
    def sequence(self) -> int: return self._sequence
    @property
    def hash(self) -> bytes: return self._hash
    @property
    def previous_hash(self) -> bytes: return self._previous_hash
    @property
    def timestamp(self) -> int: return self._timestamp
    @property
    def bits(self) -> str: return self._bits

    @property
    def target(self) -> int:
        """Target de Proof-of-Work expandido desde el formato compacto."""
        return DifficultyUtils.bits_to_target(self._bits)

    def to_dict_header(self) -> Dict[str, Any]:
        """Serializa el encabezado (hashes en hex)."""
        return {
            "sequence": self._sequence,
            "hash": self._hash.hex(),
            "previous_hash": self._previous_hash.hex(),
            "timestamp": self._timestamp,
            "bits": self._bits
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> 'BlockHeader':
        return BlockHeader(
            sequence=int(data['sequence']),
            block_hash=bytes.fromhex(data['hash']),
            previous_hash=bytes.fromhex(data['previous_hash']),
            timestamp=int(data['timestamp']),
            bits=data['bits']
        )

    def __repr__(self) -> str:
        return f"BlockHeader(sequence={self._sequence}, hash={self._hash.hex()[:12]}...)"
