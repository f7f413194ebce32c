# chaininfo/core/utils/difficulty_utils.py

import logging
from chaininfo.core.config.consensus_config import ConsensusConfig

logger = logging.getLogger(__name__)

class DifficultyUtils:

    # Espacio total de hashes (256 bits)
    HASH_SPACE = 2 ** 256

    @staticmethod
    def _get_max_target() -> int:
        try:
            return ConsensusConfig().max_target
        except Exception:
            # Fallback seguro: Target más alto posible
            return 0x7fffff * (2 ** (8 * (0x20 - 3)))

    @staticmethod
    def bits_to_target(bits: str) -> int:
        limit = DifficultyUtils._get_max_target()

        try:
            if not bits or len(bits) != 8:
                return limit

            # Desglose: [Exponente (2)][Mantisa (6)]
            exp = int(bits[:2], 16)
            mant = int(bits[2:], 16)

            if exp >= 3:
                target = mant << (8 * (exp - 3))
            else:
                target = mant >> (8 * (3 - exp))

            # El target no puede ser más fácil que el límite del Génesis
            return min(target, limit)

        except ValueError:
            logger.exception(f"Error convirtiendo bits: {bits}")
            return limit

    @staticmethod
    def target_to_bits(target: int) -> str:
        limit = DifficultyUtils._get_max_target()

        if target < 0:
            raise ValueError("Target negativo.")
        if target == 0:
            return '00000000'

        if target > limit:
            target = limit

        # Serialización a bytes (Big Endian)
        target_bytes = target.to_bytes((target.bit_length() + 7) // 8, 'big')
        exponent = len(target_bytes)

        # Normalización de la mantisa
        if exponent > 3:
            mantissa_bytes = target_bytes[:3]
        else:
            mantissa_bytes = target_bytes.ljust(3, b'\x00')

        # Bit de signo: evita que la mantisa se lea como negativa
        if mantissa_bytes[0] > 0x7f:
            mantissa_bytes = b'\x00' + mantissa_bytes[:2]
            exponent += 1

        return f'{exponent:02x}{mantissa_bytes.hex()}'

    @staticmethod
    def target_to_difficulty(target: int) -> int:
        """
        Dificultad = espacio de hashes / target.
        Un target 0 no tiene dificultad definida; se reporta como 0.
        """
        if target < 0:
            raise ValueError("Target negativo.")
        if target == 0:
            return 0
        return DifficultyUtils.HASH_SPACE // target
