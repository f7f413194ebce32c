# chaininfo/interface/api/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional

from chaininfo.core.models.block_summary import BlockSummary
from chaininfo.core.models.identifier_spec import IdentifierSpec

class ImmutableModel(BaseModel):
    """
    Clase base que fuerza la inmutabilidad (frozen=True).
    Garantiza que el estado del objeto no sea modificado después de crearse.
    """
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra='ignore'
    )

# --- PETICIONES ---

class BlockInfoRequest(ImmutableModel):
    search: Optional[str] = Field(None, description="Hash o altura en texto libre")
    hash: Optional[str] = Field(None, description="Hash del bloque en hex")
    height: Optional[int] = Field(None, description="Altura; negativos cuentan desde la punta (-1 = punta)")

    def to_spec(self) -> IdentifierSpec:
        return IdentifierSpec(search=self.search, hash=self.hash, height=self.height)

class BlocksInfoRequest(ImmutableModel):
    height: int = Field(..., description="Altura inicial; negativos cuentan desde la punta")
    number: int = Field(0, ge=0, description="Cantidad de bloques consecutivos")

class HeightRequest(ImmutableModel):
    stream: Optional[bool] = None

# --- RESPUESTAS ---

class BlockInfo(ImmutableModel):
    height: int
    difficulty: str
    block_hash: str
    reward: str
    timestamp: int

    @classmethod
    def from_summary(cls, summary: BlockSummary) -> 'BlockInfo':
        return cls(**summary.to_dict())

class BlockInfoResponse(ImmutableModel):
    block: BlockInfo

class BlocksInfoResponse(ImmutableModel):
    blocks: List[BlockInfoResponse]

class NodeStatusResponse(ImmutableModel):
    height: Optional[int]
    genesis_sequence: int
    storage_engine: str

class ErrorResponse(ImmutableModel):
    code: str
    message: str
    identifier: Optional[str] = None
