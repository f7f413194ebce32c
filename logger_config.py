# logger_config.py
import logging
import os
import glob
import sys
from typing import List

from chaininfo.core.config.paths import Paths

def setup_logging(level: int = logging.INFO):
    # 1. Ruta de logs centralizada (CHAININFO_DATA_DIR/logs o data/logs)
    log_dir = str(Paths.ensure_directories_exist()["logs"])

    # 2. Rotación de Archivos: siguiente número libre (chaininfo_0.log, chaininfo_1.log...)
    existentes: List[str] = glob.glob(os.path.join(log_dir, "chaininfo_*.log"))
    indices: List[int] = []
    for archivo in existentes:
        try:
            indices.append(int(archivo.split('_')[-1].split('.')[0]))
        except (ValueError, IndexError): continue

    siguiente: int = max(indices) + 1 if indices else 0
    nombre_archivo: str = os.path.join(log_dir, f"chaininfo_{siguiente}.log")

    # 3. Root Logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Evita handlers duplicados si se llama dos veces
    root_logger.handlers = []

    # --- CANAL 1: ARCHIVO (historial detallado) ---
    fh = logging.FileHandler(nombre_archivo, encoding='utf-8')
    fh.setLevel(level)
    fh.setFormatter(logging.Formatter('%(asctime)s [%(levelname)s] [%(name)s]: %(message)s'))

    # --- CANAL 2: TERMINAL (solo ERRORES o CRÍTICOS) ---
    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(logging.ERROR)
    ch.setFormatter(logging.Formatter('\n❌ ERROR EN: %(name)s | Línea: %(lineno)d\nDetalle: %(message)s\n'))

    root_logger.addHandler(fh)
    root_logger.addHandler(ch)

    return nombre_archivo
