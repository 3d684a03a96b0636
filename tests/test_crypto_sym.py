# --------------------------------------------------------------
# File: test_crypto_sym.py
# Description: Pruebas del cifrado y descifrado simétrico con AES-GCM y AES-ECB.
# --------------------------------------------------------------

import os

import pytest

from core.crypto_sym import decrypt, decrypt_ecb, decrypt_gcm, encrypt, encrypt_ecb, encrypt_gcm, validate_mode
from core.errors import (
    AuthenticationFailed,
    CipherInitError,
    InvalidCiphertext,
    InvalidLength,
    InvalidMode,
    InvalidPadding,
)


@pytest.mark.parametrize("size", [0, 1, 15, 16, 17, 128, 1000])
def test_aes_gcm_roundtrip_ok(size):
    """Comprueba que un cifrado con AES-GCM pueda revertirse correctamente.

    Returns:
        None: Las aserciones evalúan la igualdad entre claro y descifrado.
    """
    plaintext = os.urandom(size)
    result = encrypt_gcm(plaintext)
    assert len(result.key) == 32
    assert len(result.ciphertext) == 12 + size + 16
    assert decrypt_gcm(result.ciphertext, result.key) == plaintext


@pytest.mark.parametrize("size", [0, 1, 15, 16, 17, 128, 1000])
def test_aes_ecb_roundtrip_ok(size):
    """Comprueba que un cifrado ECB con relleno pueda revertirse.

    Returns:
        None: Las aserciones evalúan la igualdad entre claro y descifrado.
    """
    plaintext = os.urandom(size)
    result = encrypt_ecb(plaintext)
    assert len(result.key) == 32
    assert decrypt_ecb(result.ciphertext, result.key) == plaintext


def test_aes_ecb_aligned_plaintext_gets_extra_block():
    """Un claro múltiplo de 16 produce un bloque cifrado adicional.

    Returns:
        None: Se compara la longitud del ciphertext.
    """
    result = encrypt_ecb(b"A" * 32)
    assert len(result.ciphertext) == 48


def test_aes_ecb_identical_blocks_identical_ciphertext():
    """Dos bloques en claro iguales producen bloques cifrados iguales.

    Returns:
        None: Se comparan los dos primeros bloques del ciphertext.
    """
    block = b"YELLOW SUBMARINE"
    result = encrypt_ecb(block * 2)
    assert result.ciphertext[:16] == result.ciphertext[16:32]


def test_aes_gcm_detects_tampering_every_bit():
    """Verifica que cualquier bit alterado del ciphertext sea detectado.

    Returns:
        None: La expectativa es AuthenticationFailed para cada bit.
    """
    result = encrypt_gcm(b"hola mundo")
    for index in range(len(result.ciphertext)):
        for bit in range(8):
            tampered = bytearray(result.ciphertext)
            tampered[index] ^= 1 << bit
            with pytest.raises(AuthenticationFailed):
                decrypt_gcm(bytes(tampered), result.key)


def test_aes_gcm_detects_truncation():
    """Un ciphertext truncado no debe descifrarse.

    Returns:
        None: Se espera AuthenticationFailed.
    """
    result = encrypt_gcm(b"mensaje")
    with pytest.raises(AuthenticationFailed):
        decrypt_gcm(result.ciphertext[:-1], result.key)
    with pytest.raises(AuthenticationFailed):
        decrypt_gcm(result.ciphertext[:12], result.key)


def test_aes_gcm_wrong_key_fails():
    """Una clave distinta invalida la etiqueta.

    Returns:
        None: Se espera AuthenticationFailed.
    """
    result = encrypt_gcm(b"msg")
    with pytest.raises(AuthenticationFailed):
        decrypt_gcm(result.ciphertext, os.urandom(32))


def test_aes_gcm_too_short_ciphertext():
    """Un ciphertext menor que el nonce se rechaza.

    Returns:
        None: Se espera InvalidCiphertext.
    """
    with pytest.raises(InvalidCiphertext):
        decrypt_gcm(b"\x00" * 11, os.urandom(32))


def test_aes_gcm_nonce_uniqueness():
    """Evalúa que los nonces aleatorios generados no se repitan.

    Returns:
        None: Las aserciones verifican la unicidad dentro del muestreo.
    """
    nonces = set()
    for _ in range(200):
        nonce = encrypt_gcm(b"x").ciphertext[:12]
        assert nonce not in nonces
        nonces.add(nonce)


def test_aes_ecb_tampering_is_not_authenticated():
    """Alterar un bit en ECB nunca produce un error de autenticación.

    Returns:
        None: El descifrado devuelve basura o, como mucho, InvalidPadding.
    """
    plaintext = b"A" * 40
    result = encrypt_ecb(plaintext)
    for index in range(len(result.ciphertext)):
        tampered = bytearray(result.ciphertext)
        tampered[index] ^= 0x01
        try:
            recovered = decrypt_ecb(bytes(tampered), result.key)
        except InvalidPadding:
            continue
        assert recovered != plaintext


def test_aes_ecb_unaligned_ciphertext_fails():
    """El ciphertext ECB debe ser múltiplo de 16 bytes.

    Returns:
        None: Se espera InvalidLength.
    """
    with pytest.raises(InvalidLength):
        decrypt_ecb(b"\x00" * 17, os.urandom(32))


def test_aes_ecb_empty_ciphertext_fails_padding():
    """Un ciphertext vacío no contiene relleno.

    Returns:
        None: Se espera InvalidPadding.
    """
    with pytest.raises(InvalidPadding):
        decrypt_ecb(b"", os.urandom(32))


@pytest.mark.parametrize("key_size", [0, 5, 31, 33])
def test_invalid_key_length(key_size):
    """Una clave con longitud no admitida por AES se rechaza en ambos modos.

    Returns:
        None: Se espera CipherInitError.
    """
    with pytest.raises(CipherInitError):
        decrypt_gcm(b"\x00" * 40, b"k" * key_size)
    with pytest.raises(CipherInitError):
        decrypt_ecb(b"\x00" * 16, b"k" * key_size)


@pytest.mark.parametrize("mode", ["ecb", "gcm"])
def test_mode_dispatch_roundtrip(mode):
    """La selección por etiqueta de modo descifra lo que cifra.

    Returns:
        None: Se compara el claro recuperado.
    """
    result = encrypt(b"texto de prueba", mode)
    assert decrypt(result.ciphertext, result.key, mode) == b"texto de prueba"


@pytest.mark.parametrize("mode", ["cbc", "GCM", "", "ecb "])
def test_invalid_mode_rejected(mode):
    """Cualquier modo distinto de `ecb` o `gcm` se rechaza.

    Returns:
        None: Se espera InvalidMode.
    """
    with pytest.raises(InvalidMode):
        validate_mode(mode)
    with pytest.raises(InvalidMode):
        encrypt(b"x", mode)
