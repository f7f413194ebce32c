# chaininfo/infra/persistence/database_manager.py

import sqlite3
import logging
import os
from chaininfo.core.config.config_manager import ConfigManager

logger = logging.getLogger(__name__)

class DatabaseManager:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(DatabaseManager, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        config = ConfigManager()
        self.db_path = config.persistence.db_path

        directory = os.path.dirname(self.db_path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        logger.info(f"🔌 Conectando al archivo: {self.db_path}")

        # La API atiende desde el threadpool de FastAPI: compartimos la conexión
        self.conn = sqlite3.connect(self.db_path, check_same_thread=False)

        try:
            self.conn.execute("PRAGMA journal_mode=DELETE;")
            self.conn.execute("PRAGMA synchronous=FULL;")
        except sqlite3.Error as e:
            logger.warning(f"No se pudo configurar PRAGMA: {e}")

        self._create_tables()

    def _create_tables(self):
        cursor = self.conn.cursor()

        # 1. Headers (cadena canónica, una fila por altura)
        cursor.execute('''
            CREATE TABLE IF NOT EXISTS headers (
                height INTEGER PRIMARY KEY,
                hash TEXT UNIQUE NOT NULL,
                prev_hash TEXT NOT NULL,
                timestamp INTEGER NOT NULL,
                bits TEXT NOT NULL
            )
        ''')
        cursor.execute('CREATE INDEX IF NOT EXISTS idx_hash ON headers(hash)')

        # 2. Cuerpos de bloque (fee del minero + transacciones) por hash
        cursor.execute('''
            CREATE TABLE IF NOT EXISTS block_bodies (
                hash TEXT PRIMARY KEY,
                data JSON NOT NULL
            )
        ''')

        self.conn.commit()

    def get_connection(self):
        return self.conn

    def close(self):
        if self.conn:
            self.conn.close()
            logger.info("🔌 Conexión a DB cerrada.")

    @classmethod
    def reset(cls):
        if cls._instance:
            cls._instance.close()
            cls._instance = None
