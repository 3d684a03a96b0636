# --------------------------------------------------------------
# File: padding.py
# Description: Relleno estilo PKCS7 para alinear datos al tamaño de bloque.
# --------------------------------------------------------------
"""Añade y retira el relleno usado por el modo de bloque ECB."""

from core.errors import InvalidPadding

__all__ = ["pad", "unpad"]


def pad(data: bytes, block_size: int) -> bytes:
    """Rellena `data` hasta un múltiplo de `block_size`.

    Cada byte añadido vale el número de bytes añadidos. Si la entrada ya está
    alineada se agrega un bloque completo, de modo que la salida siempre es
    más larga que la entrada.

    Args:
        data (bytes): Datos en claro.
        block_size (int): Tamaño de bloque en bytes (1-255).

    Returns:
        bytes: Datos con relleno.

    """

    count = block_size - len(data) % block_size
    return data + bytes([count]) * count


def unpad(data: bytes) -> bytes:
    """Retira el relleno leyendo únicamente el último byte.

    Los bytes anteriores al último no se comprueban.

    Args:
        data (bytes): Datos descifrados con relleno.

    Returns:
        bytes: Datos sin relleno.

    Raises:
        InvalidPadding: Si `data` está vacío o el relleno excede su longitud.

    """

    if not data:
        raise InvalidPadding("empty input")
    count = data[-1]
    if count > len(data):
        raise InvalidPadding("invalid padding")
    return data[: len(data) - count]
