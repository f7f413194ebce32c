# chaininfo/core/config/config_manager.py
'''
class ConfigManager:
    Centraliza el acceso a la configuración (Consenso y Persistencia),
    cargando valores desde el entorno (.env) o desde un JSON.

    Methods:
        __new__(cls): Patrón Singleton, una única instancia por proceso.
        _initialize(self): Carga las sub-configuraciones con valores de entorno.
        load_from_json_dict(self, json_data): Aplica un JSON completo encima del entorno.
'''

from dotenv import load_dotenv
from typing import Dict, Any

# Cargar variables de entorno si existen
load_dotenv()

from chaininfo.core.config.consensus_config import ConsensusConfig
from chaininfo.core.config.persistence_config import PersistenceConfig

class ConfigManager:

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        self._consensus = ConsensusConfig()
        self._persistence = PersistenceConfig()

    def load_from_json_dict(self, json_data: Dict[str, Any]) -> None:
        self._consensus.update_from_dict(json_data.get("consensus", {}))
        self._persistence.update_from_dict(json_data.get("storage", {}))

    # --- ACCESORES ---

    @property
    def consensus(self) -> ConsensusConfig:
        return self._consensus

    @property
    def persistence(self) -> PersistenceConfig:
        return self._persistence

    # --- Atajos ---
    @property
    def genesis_sequence(self) -> int: return self._consensus.genesis_sequence

    @classmethod
    def reset(cls) -> None:
        cls._instance = None
