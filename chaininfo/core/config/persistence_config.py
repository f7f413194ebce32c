# chaininfo/core/config/persistence_config.py
import os
from typing import Dict, Any

from chaininfo.core.config.paths import Paths

class PersistenceConfig:
    """
    Configuración de Persistencia.
    Define qué motor se usa y dónde vive el archivo de la cadena.
    """
    def __init__(self):
        self._storage_engine = os.getenv("CHAININFO_STORAGE_ENGINE", "sqlite").lower()
        self._db_name = os.getenv("CHAININFO_DB_NAME", "chaininfo.db")

    @property
    def db_name(self) -> str: return self._db_name
    @property
    def storage_engine(self) -> str: return self._storage_engine

    @property
    def db_path(self) -> str:
        """
        Ruta completa al archivo DB (data/blockchain/<db_name>).
        Si db_name ya es absoluto, os.path.join lo respeta tal cual.
        """
        return os.path.join(str(Paths.BLOCKCHAIN_DB_DIR), self._db_name)

    def update_from_dict(self, data: Dict[str, Any]) -> None:
        if not data: return

        if "engine" in data:
            self._storage_engine = str(data["engine"]).lower()
        if "db_name" in data:
            self._db_name = str(data["db_name"])
