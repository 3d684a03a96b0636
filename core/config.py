# --------------------------------------------------------------
# File: config.py
# Description: Parámetros de ejecución leídos del entorno y del archivo .env.
# --------------------------------------------------------------
"""Configuración del servicio y preparación del registro de eventos."""

import logging
import os

from dotenv import load_dotenv

load_dotenv()

# Parámetros criptográficos fijos (AES-256, nonce GCM de 96 bits).
AES_KEY_SIZE = 32
GCM_NONCE_SIZE = 12
BLOCK_SIZE = 16

MODE_ECB = "ecb"
MODE_GCM = "gcm"
SUPPORTED_MODES = (MODE_ECB, MODE_GCM)

# Parámetros ajustables desde el entorno.
ENCRYPTED_DIR = os.getenv("ENCRYPTED_DIR", "./encrypted")
MAX_FILE_SIZE = int(os.getenv("MAX_FILE_SIZE", str(10 << 20)))
BRUTEFORCE_TIMEOUT = float(os.getenv("BRUTEFORCE_TIMEOUT", "30"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Configura el logging raíz con el nivel indicado.

    Args:
        level (str): Nombre del nivel (`DEBUG`, `INFO`, ...).

    """

    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
