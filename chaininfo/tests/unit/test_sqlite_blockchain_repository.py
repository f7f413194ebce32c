# chaininfo/tests/unit/test_sqlite_blockchain_repository.py
import sys
import os
import shutil
import tempfile
import unittest

# --- AJUSTE DE RUTA ---
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.abspath(os.path.join(current_dir, '../../..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from chaininfo.infra.persistence.sqlite.sqlite_blockchain_repository import SqliteBlockchainRepository
from chaininfo.infra.persistence.database_manager import DatabaseManager
from chaininfo.core.config.config_manager import ConfigManager
from chaininfo.core.exceptions import EmptyChainError, InconsistentStoreError, NotFoundError
from chaininfo.core.models.blockchain import Blockchain
from chaininfo.core.models.identifier_spec import IdentifierSpec
from chaininfo.core.services.block_resolver import BlockResolver
from chaininfo.tests.mocks.chain_fixtures import block_hash, make_block

class TestSqlitePersistence(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp(prefix="chaininfo_sqlite_")
        self.db_path = os.path.join(self.tmp_dir, "sqlite_test.db")

        # Resetear Singletons (Vital)
        DatabaseManager.reset()
        ConfigManager.reset()

        # Inyección manual: ruta absoluta, os.path.join la respeta
        config = ConfigManager()
        config.persistence._db_name = self.db_path # type: ignore
        config.persistence._storage_engine = "sqlite" # type: ignore

        self.repo = SqliteBlockchainRepository()
        self.chain = Blockchain(self.repo, genesis_sequence=1)

    def tearDown(self):
        DatabaseManager.reset()
        ConfigManager.reset()
        shutil.rmtree(self.tmp_dir, ignore_errors=True)

    def test_uses_configured_file(self):
        self.assertEqual(DatabaseManager().db_path, self.db_path)
        self.assertTrue(os.path.exists(self.db_path))

    def test_save_and_get_block(self):
        print(">> Ejecutando: test_save_and_get_block...")
        original = make_block(1, fee=-(10 ** 30))
        self.assertTrue(self.chain.add_block(original))

        header = self.chain.get_header_by_hash(original.header.hash)
        self.assertIsNotNone(header)
        if header:
            self.assertEqual(header.sequence, 1)
            self.assertEqual(header.bits, original.header.bits)
            block = self.chain.get_block_by_header(header)
            self.assertIsNotNone(block)
            if block:
                # El fee viaja como string: no pierde precisión
                self.assertEqual(block.miners_fee, -(10 ** 30))
                self.assertEqual(block.transactions, ["tx_1_0"])
        print("[SUCCESS] Bloque guardado y recuperado.")

    def test_head_is_highest_sequence(self):
        for seq in (1, 3, 2):
            self.chain.add_block(make_block(seq))

        self.assertEqual(self.chain.head_header().sequence, 3)
        self.assertEqual(len(self.chain), 3)

    def test_empty_chain_has_no_head(self):
        with self.assertRaises(EmptyChainError):
            self.chain.head_header()

    def test_idempotency_duplicate_save(self):
        b1 = make_block(1)
        self.chain.add_block(b1)
        self.chain.add_block(b1)
        self.assertEqual(self.repo.count(), 1)

    def test_import_blocks_atomic(self):
        self.chain.import_blocks([make_block(seq) for seq in range(1, 11)])
        self.assertEqual(len(self.chain), 10)
        self.assertEqual(self.chain.get_header_by_sequence(10).hash, block_hash(10)) # type: ignore

    def test_import_rolls_back_on_bad_block(self):
        good = make_block(1).to_dict()
        with self.assertRaises(KeyError):
            self.repo.save_blocks_atomic([good, {"header": {"sequence": 2}}])
        self.assertEqual(self.repo.count(), 0)

    def test_header_without_body(self):
        data = make_block(5).to_dict()
        del data["body"]
        self.repo.save_block(data)

        resolver = BlockResolver(self.chain)
        with self.assertRaises(InconsistentStoreError):
            resolver.resolve_one(IdentifierSpec(height=5))

    def test_out_of_range_height_is_not_found(self):
        print(">> Ejecutando: test_out_of_range_height_is_not_found...")
        self.chain.import_blocks([make_block(seq) for seq in range(1, 6)])
        resolver = BlockResolver(self.chain)

        self.assertIsNone(self.repo.get_header_by_height(2 ** 63))
        self.assertIsNone(self.repo.get_header_by_height(-(2 ** 63) - 1))

        with self.assertRaises(NotFoundError) as ctx:
            resolver.resolve_one(IdentifierSpec(search="9" * 30))
        self.assertEqual(ctx.exception.message, "No block found with sequence " + "9" * 30)

        with self.assertRaises(NotFoundError):
            resolver.resolve_one(IdentifierSpec(height=2 ** 70))

        with self.assertRaises(NotFoundError):
            resolver.resolve_range(2 ** 63, 1)
        print("[SUCCESS] Alturas gigantes reportadas como no encontradas.")

    def test_resolver_over_sqlite(self):
        self.chain.import_blocks([make_block(seq) for seq in range(1, 21)])
        resolver = BlockResolver(self.chain)

        self.assertEqual(resolver.resolve_one(IdentifierSpec(search="-1")).height, 20)
        self.assertEqual([s.height for s in resolver.resolve_range(-3, 3)], [18, 19, 20])

if __name__ == "__main__":
    unittest.main()
