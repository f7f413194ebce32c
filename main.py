import os
import sys
import json
import argparse
import logging
from typing import Any, Dict, List, Optional

import uvicorn

import logger_config

from chaininfo.core.config.config_manager import ConfigManager
from chaininfo.core.exceptions import ChainInfoError
from chaininfo.core.models.block import Block
from chaininfo.core.models.block_summary import BlockSummary
from chaininfo.core.models.identifier_spec import IdentifierSpec
from chaininfo.core.services.block_resolver import BlockResolver
from chaininfo.infra.persistence.repository_factory import RepositoryFactory

logger = logging.getLogger()

# =========================================================
# 🛠️ FUNCIONES DE UTILIDAD
# =========================================================

def load_config(config_path: str) -> Dict[str, Any]:
    """Carga el archivo JSON de configuración."""
    if not os.path.exists(config_path):
        logger.critical(f"❌ No existe el archivo de configuración: {config_path}")
        sys.exit(1)

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        logger.critical(f"❌ JSON Corrupto en {config_path}: {e}")
        sys.exit(1)

def print_summaries(summaries: List[BlockSummary]) -> None:
    for summary in summaries:
        print(json.dumps({"block": summary.to_dict()}, indent=2))

# =========================================================
# 🧰 COMANDOS
# =========================================================

def cmd_serve(args: argparse.Namespace) -> None:
    print(f"🌐 API Disponible en: http://{args.host}:{args.port}")
    uvicorn.run(
        "chaininfo.interface.api.server:create_app",
        factory=True,
        host=args.host,
        port=args.port,
        log_level="info"
    )

def cmd_block(args: argparse.Namespace) -> None:
    resolver = BlockResolver(RepositoryFactory.create_chain_store())
    print_summaries([resolver.resolve_one(IdentifierSpec(search=args.search))])

def cmd_blocks(args: argparse.Namespace) -> None:
    resolver = BlockResolver(RepositoryFactory.create_chain_store())
    print_summaries(resolver.resolve_range(args.height, args.number))

def cmd_height(args: argparse.Namespace) -> None:
    resolver = BlockResolver(RepositoryFactory.create_chain_store())
    print_summaries([resolver.resolve_latest()])

def cmd_import(args: argparse.Namespace) -> None:
    raw = load_config(args.file)
    if not isinstance(raw, list):
        logger.critical("❌ El archivo de importación debe contener una lista de bloques.")
        sys.exit(1)

    blocks = [Block.from_dict(item) for item in raw]
    chain = RepositoryFactory.create_chain_store()
    chain.import_blocks(blocks)
    print(f"📥 {len(blocks)} bloques importados. Total en la cadena: {len(chain)}")

# =========================================================
# 🚀 ENTRY POINT PRINCIPAL
# =========================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Consulta de bloques (Chain Info)")
    parser.add_argument("--config", help="Archivo JSON de configuración")
    parser.add_argument("--verbose", action="store_true", help="Log a nivel DEBUG")

    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Levanta la API HTTP")
    serve.add_argument("--host", default=os.getenv("CHAININFO_API_HOST", "0.0.0.0"))
    serve.add_argument("--port", type=int, default=int(os.getenv("CHAININFO_API_PORT", 8020)))
    serve.set_defaults(func=cmd_serve)

    block = sub.add_parser("block", help="Resumen de un bloque por hash o altura")
    block.add_argument("search", help="Hash en hex o altura (negativos desde la punta)")
    block.set_defaults(func=cmd_block)

    blocks = sub.add_parser("blocks", help="Resumen de N bloques consecutivos")
    blocks.add_argument("height", type=int, help="Altura inicial")
    blocks.add_argument("number", type=int, help="Cantidad de bloques")
    blocks.set_defaults(func=cmd_blocks)

    height = sub.add_parser("height", help="Resumen del bloque en la punta")
    height.set_defaults(func=cmd_height)

    importer = sub.add_parser("import", help="Importa bloques desde un JSON")
    importer.add_argument("file", help="Lista JSON de bloques {header, body}")
    importer.set_defaults(func=cmd_import)

    return parser

def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    log_file = logger_config.setup_logging(logging.DEBUG if args.verbose else logging.INFO)
    logger.info(f"📝 Log de sesión: {log_file}")

    if args.config:
        ConfigManager().load_from_json_dict(load_config(args.config))

    try:
        args.func(args)
    except ChainInfoError as e:
        logger.error(f"Consulta fallida ({e.kind}): {e.message}")
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
