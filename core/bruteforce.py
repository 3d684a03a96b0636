# --------------------------------------------------------------
# File: bruteforce.py
# Description: Recuperación de claves AES-ECB a partir de un prefijo conocido.
# --------------------------------------------------------------
"""Búsqueda por fuerza bruta acotada y cancelable de los últimos bytes de una clave.

Un único hilo de trabajo recorre los sufijos candidatos en orden
lexicográfico ascendente, descifra con cada clave y acepta el primer
resultado que la heurística considera texto. El llamante espera el resultado
o el plazo, lo que ocurra antes; después activa la señal de cancelación para
que el hilo abandonado termine en su siguiente iteración.

Las ventanas de búsqueda para 3 y 4 bytes ausentes están reducidas a
propósito (0-31 y 0-15 por byte) y no cubren todo el espacio de claves.
"""

import itertools
import logging
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeout
from typing import Dict, Iterator, Optional, Tuple

from core import config
from core.crypto_sym import decrypt_ecb
from core.errors import CipherError, SearchNotFound
from core.heuristic import is_meaningful_text
from core.models import BruteForceResult

logger = logging.getLogger(__name__)

# Valores posibles por byte según cuántos bytes faltan.
SEARCH_RANGES: Dict[int, int] = {1: 256, 2: 256, 3: 32, 4: 16}


def missing_byte_count(known_prefix: bytes) -> int:
    """Número de bytes que faltan para completar una clave de 32 bytes."""

    return config.AES_KEY_SIZE - len(known_prefix)


def iter_candidates(missing: int) -> Iterator[bytes]:
    """Genera los sufijos candidatos para `missing` bytes ausentes.

    El byte más significativo varía más despacio.

    Args:
        missing (int): Bytes ausentes, entre 1 y 4.

    Returns:
        Iterator[bytes]: Sufijos de longitud `missing`.

    """

    per_byte = range(SEARCH_RANGES[missing])
    for combo in itertools.product(per_byte, repeat=missing):
        yield bytes(combo)


def scan_candidates(
    ciphertext: bytes, known_prefix: bytes, cancel: threading.Event
) -> Tuple[Optional[BruteForceResult], int]:
    """Recorre la ventana de candidatos hasta acertar, agotarla o ser cancelado.

    Args:
        ciphertext (bytes): Ciphertext producido en modo ECB.
        known_prefix (bytes): Bytes iniciales conocidos de la clave.
        cancel (threading.Event): Señal cooperativa, se consulta en cada candidato.

    Returns:
        Tuple[Optional[BruteForceResult], int]: Resultado (o ``None``) y número
        de candidatos evaluados.

    """

    tried = 0
    for suffix in iter_candidates(missing_byte_count(known_prefix)):
        if cancel.is_set():
            logger.debug("Search cancelled after %d candidates", tried)
            return None, tried
        tried += 1
        key = known_prefix + suffix
        try:
            plaintext = decrypt_ecb(ciphertext, key)
            text = plaintext.decode("utf-8")
        except (CipherError, UnicodeDecodeError):
            continue
        if is_meaningful_text(text):
            return BruteForceResult(plaintext=plaintext, key=key, candidates_tried=tried), tried
    return None, tried


class BruteForceSearcher:
    """Ejecuta búsquedas de clave con un plazo de reloj acotado.

    Args:
        timeout (Optional[float]): Segundos máximos de espera; por defecto
            `BRUTEFORCE_TIMEOUT` de la configuración.

    """

    def __init__(self, timeout: Optional[float] = None) -> None:
        self.timeout = config.BRUTEFORCE_TIMEOUT if timeout is None else timeout

    def search(self, ciphertext: bytes, known_prefix: bytes) -> BruteForceResult:
        """Busca los bytes ausentes de la clave que descifra `ciphertext`.

        Args:
            ciphertext (bytes): Ciphertext ECB.
            known_prefix (bytes): Entre 28 y 31 bytes iniciales de la clave.

        Returns:
            BruteForceResult: Texto en claro y clave completa.

        Raises:
            SearchNotFound: Si faltan menos de 1 o más de 4 bytes, si la
                ventana se agota o si vence el plazo.

        """

        missing = missing_byte_count(known_prefix)
        if missing not in SEARCH_RANGES:
            raise SearchNotFound(f"cannot search {missing} missing bytes")

        logger.info(
            "Brute force started: %d missing bytes, %d candidates, timeout %.1fs",
            missing,
            SEARCH_RANGES[missing] ** missing,
            self.timeout,
        )
        started = time.monotonic()
        cancel = threading.Event()
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="bruteforce")
        future = executor.submit(scan_candidates, ciphertext, known_prefix, cancel)
        try:
            result, tried = future.result(timeout=self.timeout)
        except FuturesTimeout:
            logger.warning("Brute force timed out after %.2fs", time.monotonic() - started)
            raise SearchNotFound("brute force timed out") from None
        finally:
            cancel.set()
            executor.shutdown(wait=False)

        elapsed = time.monotonic() - started
        if result is None:
            logger.info("Brute force exhausted %d candidates in %.2fs", tried, elapsed)
            raise SearchNotFound("brute force exhausted the search window")
        logger.info("Brute force succeeded after %d candidates in %.2fs", tried, elapsed)
        return result
