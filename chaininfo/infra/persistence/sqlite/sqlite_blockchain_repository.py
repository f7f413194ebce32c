# chaininfo/infra/persistence/sqlite/sqlite_blockchain_repository.py
import json
import logging
import sqlite3
from typing import Dict, Any, List, Optional

from chaininfo.core.interfaces.i_repository import IBlockchainRepository
from chaininfo.infra.persistence.database_manager import DatabaseManager

logger = logging.getLogger(__name__)

_HEADER_COLUMNS = "height, hash, prev_hash, timestamp, bits"

# Rango de INTEGER en SQLite (64 bits con signo)
_SQLITE_INT_MIN = -(2 ** 63)
_SQLITE_INT_MAX = 2 ** 63 - 1

class SqliteBlockchainRepository(IBlockchainRepository):

    def __init__(self):
        self.db_manager = DatabaseManager()
        self.conn = self.db_manager.get_connection()
        logger.debug("🔌 SqliteBlockchainRepository vinculado al DatabaseManager.")

    # --- Escritura ---

    def _insert(self, cursor: sqlite3.Cursor, block_data: Dict[str, Any]) -> None:
        header = block_data['header']
        cursor.execute(f"""
            INSERT OR IGNORE INTO headers ({_HEADER_COLUMNS})
            VALUES (?, ?, ?, ?, ?)
        """, (
            header['sequence'],
            header['hash'],
            header['previous_hash'],
            header['timestamp'],
            header['bits']
        ))

        body = block_data.get('body')
        if body is not None:
            cursor.execute(
                "INSERT OR IGNORE INTO block_bodies (hash, data) VALUES (?, ?)",
                (header['hash'], json.dumps(body))
            )

    def save_block(self, block_data: Dict[str, Any]) -> bool:
        """Guarda un bloque (que llega como Diccionario). Idempotente."""
        if not block_data.get('header'):
            logger.error("❌ Estructura de bloque inválida: Falta 'header'")
            return False

        try:
            self._insert(self.conn.cursor(), block_data)
            self.conn.commit()
            return True
        except sqlite3.Error as e:
            self.conn.rollback()
            seq = block_data['header'].get('sequence', '???')
            logger.error(f"❌ Error crítico guardando bloque #{seq} en SQLite: {e}")
            raise

    def save_blocks_atomic(self, chain_data: List[Dict[str, Any]]) -> bool:
        """Guarda múltiples bloques en una sola transacción."""
        try:
            cursor = self.conn.cursor()
            cursor.execute("BEGIN TRANSACTION")
            for block_data in chain_data:
                self._insert(cursor, block_data)
            self.conn.commit()
            return True
        except (sqlite3.Error, KeyError) as e:
            self.conn.rollback()
            logger.error(f"❌ Rollback ejecutado. Error guardando cadena: {e}")
            raise

    # --- Lectura ---

    @staticmethod
    def _row_to_header(row: Any) -> Dict[str, Any]:
        return {
            "sequence": row[0], "hash": row[1], "previous_hash": row[2],
            "timestamp": row[3], "bits": row[4]
        }

    def _fetch_header(self, where: str, params: tuple) -> Optional[Dict[str, Any]]:
        cursor = self.conn.cursor()
        cursor.execute(f"SELECT {_HEADER_COLUMNS} FROM headers {where}", params)
        row = cursor.fetchone()
        return self._row_to_header(row) if row else None

    def get_header_by_hash(self, block_hash: str) -> Optional[Dict[str, Any]]:
        return self._fetch_header("WHERE hash = ?", (block_hash.lower(),))

    def get_header_by_height(self, height: int) -> Optional[Dict[str, Any]]:
        # Una altura fuera del rango de la columna no puede existir
        if not _SQLITE_INT_MIN <= height <= _SQLITE_INT_MAX:
            return None
        return self._fetch_header("WHERE height = ?", (height,))

    def get_last_header(self) -> Optional[Dict[str, Any]]:
        return self._fetch_header("ORDER BY height DESC LIMIT 1", ())

    def get_block_body(self, block_hash: str) -> Optional[Dict[str, Any]]:
        cursor = self.conn.cursor()
        cursor.execute("SELECT data FROM block_bodies WHERE hash = ?", (block_hash.lower(),))
        row = cursor.fetchone()
        return json.loads(row[0]) if row else None

    def count(self) -> int:
        cursor = self.conn.cursor()
        cursor.execute("SELECT COUNT(*) FROM headers")
        row = cursor.fetchone()
        return row[0] if row else 0
