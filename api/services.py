# --------------------------------------------------------------
# File: services.py
# Description: Servicios de cifrado de archivos y texto y de fuerza bruta para la UI.
# --------------------------------------------------------------
"""Funciones de la capa de servicios: frontera Base64 sobre el núcleo criptográfico."""

import base64
import binascii
import logging
import time
from typing import List, Optional

from core.bruteforce import BruteForceSearcher
from core.config import MAX_FILE_SIZE, MODE_ECB
from core.crypto_sym import decrypt, decrypt_gcm, encrypt, encrypt_gcm, validate_mode
from core.errors import InvalidEncoding, InvalidKeyPrefixEncoding, InvalidMode, PayloadTooLarge, SearchNotFound
from core.models import (
    BruteForceRequest,
    BruteForceResponse,
    FileEncryptResponse,
    FileListResponse,
    TextDecryptRequest,
    TextDecryptResponse,
    TextEncryptRequest,
    TextEncryptResponse,
)
from core.storage import EncryptedFileStore

logger = logging.getLogger(__name__)

BRUTE_FORCE_FAILED = "Brute force failed"


def _b64(data: bytes) -> str:
    """Codifica datos binarios en Base64 estándar con relleno.

    Args:
        data (bytes): Datos binarios a convertir.

    Returns:
        str: Representación codificada.
    """

    return base64.b64encode(data).decode("ascii")


def _unb64(value: str, what: str) -> bytes:
    """Decodifica Base64 estándar.

    Args:
        value (str): Cadena codificada.
        what (str): Nombre del campo, para el mensaje de error.

    Returns:
        bytes: Datos originales en formato binario.

    Raises:
        InvalidEncoding: Si la cadena no es Base64 válido.
    """

    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidEncoding(f"{what} decode failed") from exc


def _now() -> int:
    return int(time.time())


def encrypt_file(data: bytes, store: EncryptedFileStore) -> FileEncryptResponse:
    """Cifra un archivo con AES-GCM y lo guarda en el almacén.

    Args:
        data (bytes): Contenido del archivo subido.
        store (EncryptedFileStore): Almacén de blobs cifrados.

    Returns:
        FileEncryptResponse: Nombre asignado y clave en Base64.

    Raises:
        PayloadTooLarge: Si el archivo supera `MAX_FILE_SIZE`.
    """

    if len(data) > MAX_FILE_SIZE:
        raise PayloadTooLarge(f"file exceeds {MAX_FILE_SIZE} bytes")
    result = encrypt_gcm(data)
    name = store.save(result.ciphertext)
    return FileEncryptResponse(encrypted_filename=name, key=_b64(result.key), timestamp=_now())


def decrypt_file(filename: str, key_b64: str, store: EncryptedFileStore) -> bytes:
    """Recupera un archivo cifrado del almacén y lo descifra.

    Args:
        filename (str): Nombre devuelto por `encrypt_file`.
        key_b64 (str): Clave en Base64.
        store (EncryptedFileStore): Almacén de blobs cifrados.

    Returns:
        bytes: Contenido original del archivo.
    """

    encrypted = store.load(filename)
    key = _unb64(key_b64, "key")
    plaintext = decrypt_gcm(encrypted, key)
    logger.info("Decrypted stored file %s", filename)
    return plaintext


def read_encrypted_file(filename: str, store: EncryptedFileStore) -> bytes:
    """Devuelve el blob cifrado tal como está guardado."""

    return store.load(filename)


def list_encrypted_files(store: EncryptedFileStore) -> FileListResponse:
    """Lista los archivos cifrados disponibles."""

    files: List[str] = store.list_files()
    return FileListResponse(files=files)


def encrypt_text(request: TextEncryptRequest) -> TextEncryptResponse:
    """Cifra un texto UTF-8 con el modo pedido.

    Args:
        request (TextEncryptRequest): Texto y modo (`ecb` o `gcm`).

    Returns:
        TextEncryptResponse: Ciphertext y clave en Base64.
    """

    mode = validate_mode(request.mode)
    result = encrypt(request.text.encode("utf-8"), mode)
    logger.info("Encrypted text with %s", mode)
    return TextEncryptResponse(
        ciphertext=_b64(result.ciphertext),
        key=_b64(result.key),
        mode=mode,
        timestamp=_now(),
    )


def decrypt_text(request: TextDecryptRequest) -> TextDecryptResponse:
    """Descifra un texto; los bytes que no son UTF-8 se sustituyen."""

    mode = validate_mode(request.mode)
    key = _unb64(request.key, "key")
    ciphertext = _unb64(request.ciphertext, "ciphertext")
    plaintext = decrypt(ciphertext, key, mode)
    return TextDecryptResponse(plaintext=plaintext.decode("utf-8", errors="replace"), timestamp=_now())


def brute_force(request: BruteForceRequest, searcher: Optional[BruteForceSearcher] = None) -> BruteForceResponse:
    """Intenta recuperar la clave ECB completando la parte conocida.

    Args:
        request (BruteForceRequest): Ciphertext, parte conocida de la clave y modo.
        searcher (Optional[BruteForceSearcher]): Buscador a utilizar; por
            defecto uno con el plazo configurado.

    Returns:
        BruteForceResponse: Texto y clave encontrados, o `error` con el tiempo
        empleado si la búsqueda no tuvo éxito.

    Raises:
        InvalidKeyPrefixEncoding: Si la parte conocida no es Base64 válido.
        InvalidMode: Si el modo no es `ecb`.
    """

    if validate_mode(request.mode) != MODE_ECB:
        raise InvalidMode("brute force only supports ecb")
    try:
        known_prefix = _unb64(request.known_key_part, "known key part")
    except InvalidEncoding as exc:
        raise InvalidKeyPrefixEncoding("invalid known key part encoding") from exc
    ciphertext = _unb64(request.ciphertext, "ciphertext")

    searcher = searcher or BruteForceSearcher()
    started = time.monotonic()
    try:
        result = searcher.search(ciphertext, known_prefix)
    except SearchNotFound:
        return BruteForceResponse(error=BRUTE_FORCE_FAILED, time_taken=_elapsed(started))
    return BruteForceResponse(
        plaintext=result.plaintext.decode("utf-8"),
        key=_b64(result.key),
        time_taken=_elapsed(started),
    )


def _elapsed(started: float) -> str:
    return f"{time.monotonic() - started:.3f}s"
