# chaininfo/core/exceptions.py
'''
Errores de dominio del servicio de consulta de bloques.

    ChainInfoError: Base común. Expone 'kind' (código estable para el cliente)
        e 'identifier' (lo que se intentó resolver, si aplica).
    InvalidArgumentError: La petición no trae ningún identificador utilizable.
    NotFoundError: No existe header para el hash o la secuencia pedida.
    InconsistentStoreError: Existe el header pero falta el cuerpo del bloque.
        Para el cliente es un NotFound más (mismo 'kind').
    EmptyChainError: La cadena no tiene ningún bloque persistido (sin head).
'''

from typing import Optional, Union

Identifier = Union[str, int, None]

class ChainInfoError(Exception):
    kind = "error"

    def __init__(self, message: str, identifier: Identifier = None) -> None:
        super().__init__(message)
        self.message = message
        self.identifier = identifier

    def to_dict(self):
        return {
            "code": self.kind,
            "message": self.message,
            "identifier": None if self.identifier is None else str(self.identifier)
        }

class InvalidArgumentError(ChainInfoError):
    kind = "invalid_argument"

class NotFoundError(ChainInfoError):
    kind = "not_found"

class InconsistentStoreError(NotFoundError):

    def __init__(self, header_hash: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"No block with header {header_hash}", header_hash)

class EmptyChainError(ChainInfoError):
    kind = "chain_empty"

    def __init__(self, message: str = "The chain has no blocks") -> None:
        super().__init__(message)
