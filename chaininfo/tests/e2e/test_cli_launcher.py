# chaininfo/tests/e2e/test_cli_launcher.py
import sys
import os
import io
import json
import logging
import shutil
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest.mock import patch

# --- AJUSTE DE RUTAS ---
current_dir = os.path.dirname(os.path.abspath(__file__))
project_root = os.path.abspath(os.path.join(current_dir, '../../..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import main as launcher
from chaininfo.core.config.config_manager import ConfigManager
from chaininfo.core.config.paths import Paths
from chaininfo.infra.persistence.database_manager import DatabaseManager
from chaininfo.tests.mocks.chain_fixtures import make_block

class TestCliLauncher(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp(prefix="chaininfo_cli_")
        self.env = {
            "CHAININFO_DATA_DIR": self.tmp_dir,
            "CHAININFO_STORAGE_ENGINE": "sqlite",
            "CHAININFO_DB_NAME": os.path.join(self.tmp_dir, "cli.db"),
        }
        ConfigManager.reset()
        DatabaseManager.reset()

        self.blocks_file = os.path.join(self.tmp_dir, "blocks.json")
        with open(self.blocks_file, "w", encoding="utf-8") as f:
            json.dump([make_block(seq).to_dict() for seq in range(1, 31)], f)

    def tearDown(self):
        root = logging.getLogger()
        for handler in root.handlers[:]:
            handler.close()
            root.removeHandler(handler)
        DatabaseManager.reset()
        ConfigManager.reset()
        shutil.rmtree(self.tmp_dir, ignore_errors=True)

    def run_cli(self, *argv: str):
        out = io.StringIO()
        data_dir = Path(self.tmp_dir)
        with patch.dict(os.environ, self.env), \
                patch.object(Paths, "DATA_DIR", data_dir), \
                patch.object(Paths, "LOGS_DIR", data_dir / "logs"), \
                patch.object(Paths, "BLOCKCHAIN_DB_DIR", data_dir / "blockchain"), \
                redirect_stdout(out):
            code = launcher.main(list(argv))
        return code, out.getvalue()

    def test_import_then_query(self):
        print("\n>> Ejecutando: test_import_then_query...")
        code, out = self.run_cli("import", self.blocks_file)
        self.assertEqual(code, 0)
        self.assertIn("30", out)

        code, out = self.run_cli("block", "-1")
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out)["block"]["height"], 30)

        code, out = self.run_cli("height")
        self.assertEqual(code, 0)
        self.assertEqual(json.loads(out)["block"]["height"], 30)
        print("[SUCCESS] Importación y consulta por CLI.")

    def test_session_log_written_under_data_dir(self):
        self.run_cli("import", self.blocks_file)

        logs = os.listdir(os.path.join(self.tmp_dir, "logs"))
        self.assertIn("chaininfo_0.log", logs)
        self.assertTrue(os.path.isdir(os.path.join(self.tmp_dir, "blockchain")))

    def test_blocks_range(self):
        self.run_cli("import", self.blocks_file)
        code, out = self.run_cli("blocks", "5", "2")

        self.assertEqual(code, 0)
        self.assertEqual(out.count('"height"'), 2)

    def test_missing_block_returns_error_code(self):
        self.run_cli("import", self.blocks_file)
        code, _ = self.run_cli("block", "999")
        self.assertEqual(code, 1)

if __name__ == "__main__":
    unittest.main()
