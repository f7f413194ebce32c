# chaininfo/core/models/block.py

from typing import List, Dict, Any, Optional

from chaininfo.core.models.block_header import BlockHeader

class Block:
    """
    Bloque completo: header + cuerpo.
    'miners_fee' es la comisión de la transacción del minero. Se guarda con
    signo (puede venir negativa) y con precisión arbitraria.
    """

    def __init__(
        self,
        header: BlockHeader,
        miners_fee: int,
        transactions: Optional[List[str]] = None
    ) -> None:
        self._header = header
        self._miners_fee = miners_fee
        self._transactions: List[str] = transactions if transactions else []

    @property
    def header(self) -> BlockHeader: return self._header
    @property
    def miners_fee(self) -> int: return self._miners_fee
    @property
    def transactions(self) -> List[str]: return self._transactions[:]

    def to_dict(self) -> Dict[str, Any]:
        """
        Estructura anidada para el Repositorio.
        Separamos 'header' del cuerpo. El fee viaja como string para no perder precisión.
        """
        return {
            "header": self._header.to_dict_header(),
            "body": {
                "miners_fee": str(self._miners_fee),
                "transactions": self._transactions[:]
            }
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> 'Block':
        """Reconstruye un Block desde el diccionario persistido."""
        body_data = data.get('body', {})
        tx_list: List[str] = [str(tx) for tx in body_data.get('transactions', [])]

        return Block(
            header=BlockHeader.from_dict(data['header']),
            miners_fee=int(body_data.get('miners_fee', 0)),
            transactions=tx_list
        )
