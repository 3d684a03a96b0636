# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas AES-GCM y AES-ECB para cifrado y descifrado simétrico.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico en los modos autenticado (GCM) y de bloque (ECB).

GCM genera clave y nonce aleatorios y detecta cualquier alteración. ECB cifra
cada bloque de 16 bytes de forma independiente, sin encadenamiento ni
integridad: dos bloques en claro iguales producen bloques cifrados iguales.
"""

import logging
import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from core.config import AES_KEY_SIZE, BLOCK_SIZE, GCM_NONCE_SIZE, MODE_ECB, MODE_GCM, SUPPORTED_MODES
from core.errors import (
    AuthenticationFailed,
    CipherInitError,
    InvalidCiphertext,
    InvalidLength,
    InvalidMode,
    KeyGenError,
)
from core.models import CipherResult
from core.padding import pad, unpad

logger = logging.getLogger(__name__)


def _random_bytes(size: int) -> bytes:
    """Obtiene `size` bytes aleatorios del sistema operativo."""

    try:
        return os.urandom(size)
    except OSError as exc:
        raise KeyGenError(f"random generation failed: {exc}") from exc


def _aesgcm(key: bytes) -> AESGCM:
    try:
        return AESGCM(key)
    except (TypeError, ValueError) as exc:
        raise CipherInitError(f"cipher creation failed: {exc}") from exc


def _aes_ecb(key: bytes) -> Cipher:
    try:
        return Cipher(algorithms.AES(key), modes.ECB())
    except (TypeError, ValueError) as exc:
        raise CipherInitError(f"cipher creation failed: {exc}") from exc


def validate_mode(mode: str) -> str:
    """Comprueba que el modo sea uno de los admitidos.

    Args:
        mode (str): Etiqueta de modo recibida (`ecb` o `gcm`).

    Returns:
        str: El mismo modo, ya validado.

    Raises:
        InvalidMode: Si el modo no está soportado.

    """

    if mode not in SUPPORTED_MODES:
        raise InvalidMode(f"unsupported mode: {mode!r}")
    return mode


def encrypt_gcm(plaintext: bytes) -> CipherResult:
    """Cifra datos con AES-256-GCM usando clave y nonce aleatorios.

    Args:
        plaintext (bytes): Datos en claro que se cifrarán.

    Returns:
        CipherResult: `ciphertext` = nonce (12 bytes) + datos sellados con tag,
        y la `key` generada.

    """

    key = _random_bytes(AES_KEY_SIZE)
    return CipherResult(ciphertext=gcm_encrypt_with_key(key, plaintext), key=key)


def gcm_encrypt_with_key(key: bytes, plaintext: bytes) -> bytes:
    """Cifra con AES-GCM utilizando una clave proporcionada y un nonce nuevo.

    Args:
        key (bytes): Clave simétrica de 128, 192 o 256 bits.
        plaintext (bytes): Datos a cifrar.

    Returns:
        bytes: Nonce seguido de los datos sellados con su tag.

    """

    aes = _aesgcm(key)
    nonce = _random_bytes(GCM_NONCE_SIZE)
    sealed = aes.encrypt(nonce, plaintext, None)
    logger.debug("GCM encrypted %d bytes", len(plaintext))
    return nonce + sealed


def decrypt_gcm(ciphertext: bytes, key: bytes) -> bytes:
    """Descifra un ciphertext AES-GCM con formato nonce || sellado.

    Args:
        ciphertext (bytes): Nonce de 12 bytes seguido de datos y tag.
        key (bytes): Clave simétrica de 128, 192 o 256 bits.

    Returns:
        bytes: Mensaje original en claro.

    Raises:
        CipherInitError: Si la longitud de la clave no es válida para AES.
        InvalidCiphertext: Si el ciphertext es más corto que el nonce.
        AuthenticationFailed: Si la etiqueta no verifica.

    """

    aes = _aesgcm(key)
    if len(ciphertext) < GCM_NONCE_SIZE:
        raise InvalidCiphertext("ciphertext too short")
    nonce, sealed = ciphertext[:GCM_NONCE_SIZE], ciphertext[GCM_NONCE_SIZE:]
    try:
        plaintext = aes.decrypt(nonce, sealed, None)
    except InvalidTag as exc:
        raise AuthenticationFailed("message authentication failed") from exc
    logger.debug("GCM decrypted %d bytes", len(plaintext))
    return plaintext


def encrypt_ecb(plaintext: bytes) -> CipherResult:
    """Cifra datos con AES-256 bloque a bloque (ECB) tras aplicar relleno.

    Args:
        plaintext (bytes): Datos en claro.

    Returns:
        CipherResult: Ciphertext múltiplo de 16 bytes y la clave generada.

    """

    key = _random_bytes(AES_KEY_SIZE)
    return CipherResult(ciphertext=ecb_encrypt_with_key(key, plaintext), key=key)


def ecb_encrypt_with_key(key: bytes, plaintext: bytes) -> bytes:
    """Rellena y cifra bloque a bloque con la clave proporcionada."""

    encryptor = _aes_ecb(key).encryptor()
    padded = pad(plaintext, BLOCK_SIZE)
    ciphertext = encryptor.update(padded) + encryptor.finalize()
    logger.debug("ECB encrypted %d bytes into %d blocks", len(plaintext), len(ciphertext) // BLOCK_SIZE)
    return ciphertext


def decrypt_ecb(ciphertext: bytes, key: bytes) -> bytes:
    """Descifra un ciphertext ECB y retira el relleno.

    No hay comprobación de integridad: un bit alterado produce basura o, a
    lo sumo, un error de relleno.

    Args:
        ciphertext (bytes): Datos cifrados alineados a 16 bytes.
        key (bytes): Clave simétrica de 128, 192 o 256 bits.

    Returns:
        bytes: Datos en claro sin relleno.

    Raises:
        CipherInitError: Si la longitud de la clave no es válida para AES.
        InvalidLength: Si el ciphertext no es múltiplo de 16 bytes.
        InvalidPadding: Si el último byte indica un relleno imposible.

    """

    decryptor = _aes_ecb(key).decryptor()
    if len(ciphertext) % BLOCK_SIZE != 0:
        raise InvalidLength("ciphertext is not a multiple of block size")
    padded = decryptor.update(ciphertext) + decryptor.finalize()
    return unpad(padded)


def encrypt(plaintext: bytes, mode: str) -> CipherResult:
    """Cifra `plaintext` con el modo indicado (`ecb` o `gcm`)."""

    if validate_mode(mode) == MODE_ECB:
        return encrypt_ecb(plaintext)
    return encrypt_gcm(plaintext)


def decrypt(ciphertext: bytes, key: bytes, mode: str) -> bytes:
    """Descifra `ciphertext` con el modo indicado (`ecb` o `gcm`)."""

    if validate_mode(mode) == MODE_GCM:
        return decrypt_gcm(ciphertext, key)
    return decrypt_ecb(ciphertext, key)
