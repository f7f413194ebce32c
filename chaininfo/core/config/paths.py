# chaininfo/core/config/paths.py

import os
from pathlib import Path

class Paths:
    """
    Centraliza las rutas absolutas del proyecto.
    Soporta Inyección de Dependencias vía Variables de Entorno.
    """

    # Raíz del código (fallback cuando no hay variable de entorno)
    _CODE_ROOT = Path(__file__).resolve().parent.parent.parent.parent

    DATA_DIR = Path(os.getenv("CHAININFO_DATA_DIR", _CODE_ROOT / "data"))

    BLOCKCHAIN_DB_DIR = DATA_DIR / "blockchain"
    LOGS_DIR = DATA_DIR / "logs"

    @staticmethod
    def ensure_directories_exist():
        """Crea toda la estructura de carpetas si no existe."""
        os.makedirs(Paths.BLOCKCHAIN_DB_DIR, exist_ok=True)
        os.makedirs(Paths.LOGS_DIR, exist_ok=True)

        return {
            "root": str(Paths.DATA_DIR),
            "logs": str(Paths.LOGS_DIR)
        }
