# chaininfo/core/config/consensus_config.py

import os
from typing import Dict, Any

class ConsensusConfig:
    """
    Constantes de la cadena que necesita la capa de consulta.
    Solo lectura: este servicio no valida ni produce bloques.
    """
    # --- CONSTANTES ESTÁTICAS ---
    DEFAULT_GENESIS_SEQUENCE = 1

    def __init__(self):
        # Secuencia del bloque génesis: piso para las alturas negativas
        self._genesis_sequence = int(os.getenv("CHAININFO_GENESIS_SEQUENCE", ConsensusConfig.DEFAULT_GENESIS_SEQUENCE))

        # --- PARÁMETROS DE DIFICULTAD (GENESIS) ---
        self._genesis_mantissa = int(os.getenv("CHAININFO_GENESIS_MANTISSA", 0x7fffff))
        self._genesis_exponent = int(os.getenv("CHAININFO_GENESIS_EXPONENT", 0x20))

    # --- Getters ---
    @property
    def genesis_sequence(self) -> int: return self._genesis_sequence

    @property
    def max_target(self) -> int:
        """Calcula el target máximo basado en los bits del génesis."""
        return self._genesis_mantissa * (2 ** (8 * (self._genesis_exponent - 3)))

    # --- Actualización desde JSON ---
    def update_from_dict(self, consensus_data: Dict[str, Any]) -> None:
        if not consensus_data:
            return

        if "genesis_sequence" in consensus_data:
            self._genesis_sequence = int(consensus_data["genesis_sequence"])

        if "genesis_mantissa" in consensus_data:
            self._genesis_mantissa = int(consensus_data["genesis_mantissa"])

        if "genesis_exponent" in consensus_data:
            self._genesis_exponent = int(consensus_data["genesis_exponent"])
