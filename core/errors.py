# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de excepciones de las operaciones de cifrado y búsqueda.
# --------------------------------------------------------------
"""Errores que el núcleo criptográfico comunica de forma síncrona al llamante.

Cada fallo queda limitado a la operación que lo provocó; ninguna de estas
excepciones es fatal para el proceso.
"""

__all__ = [
    "CipherError",
    "KeyGenError",
    "CipherInitError",
    "AuthenticationFailed",
    "InvalidCiphertext",
    "InvalidLength",
    "InvalidPadding",
    "InvalidMode",
    "InvalidEncoding",
    "InvalidKeyPrefixEncoding",
    "SearchNotFound",
    "PayloadTooLarge",
    "StorageError",
]


class CipherError(Exception):
    """Clase base de todos los errores del servicio de cifrado."""


class KeyGenError(CipherError):
    """No se pudo obtener aleatoriedad para la clave o el nonce."""


class CipherInitError(CipherError):
    """La clave tiene una longitud que AES no acepta."""


class AuthenticationFailed(CipherError):
    """La etiqueta GCM no coincide: clave errónea o datos alterados."""


class InvalidCiphertext(CipherError):
    """El ciphertext GCM es más corto que el nonce."""


class InvalidLength(CipherError):
    """El ciphertext ECB no es múltiplo del tamaño de bloque."""


class InvalidPadding(CipherError):
    """El relleno del último bloque no es coherente con la longitud."""


class InvalidMode(CipherError):
    """El modo solicitado no es `ecb` ni `gcm`."""


class InvalidEncoding(CipherError):
    """Un valor recibido en Base64 no se puede decodificar."""


class InvalidKeyPrefixEncoding(InvalidEncoding):
    """La parte conocida de la clave no es Base64 válido."""


class SearchNotFound(CipherError):
    """La fuerza bruta agotó la enumeración o superó el plazo."""


class PayloadTooLarge(CipherError):
    """El archivo recibido supera el tamaño máximo configurado."""


class StorageError(CipherError):
    """Nombre de archivo inválido o archivo cifrado inexistente."""
