# chaininfo/core/models/block_summary.py

from dataclasses import dataclass
from typing import Dict, Any

@dataclass(frozen=True)
class BlockSummary:
    """Resumen compacto de un bloque, tal como viaja al cliente."""
    height: int
    difficulty: str
    block_hash: str
    reward: str
    timestamp: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "height": self.height,
            "difficulty": self.difficulty,
            "block_hash": self.block_hash,
            "reward": self.reward,
            "timestamp": self.timestamp
        }
