# --------------------------------------------------------------
# File: test_padding.py
# Description: Pruebas del relleno estilo PKCS7 usado por el modo ECB.
# --------------------------------------------------------------

import pytest

from core.errors import InvalidPadding
from core.padding import pad, unpad


@pytest.mark.parametrize("length", [0, 1, 15, 16, 17, 31, 32, 100])
def test_pad_aligns_and_grows(length):
    """Comprueba que el resultado esté alineado y sea más largo que la entrada.

    Returns:
        None: Las aserciones validan longitud y valor de los bytes añadidos.
    """
    data = b"a" * length
    padded = pad(data, 16)
    count = 16 - length % 16
    assert len(padded) % 16 == 0
    assert len(padded) > length
    assert padded == data + bytes([count]) * count


def test_pad_aligned_input_adds_full_block():
    """Una entrada ya alineada recibe un bloque completo de relleno.

    Returns:
        None: Se comprueba el bloque extra de bytes 0x10.
    """
    padded = pad(b"x" * 16, 16)
    assert len(padded) == 32
    assert padded[16:] == b"\x10" * 16


def test_unpad_reverses_pad():
    """Verifica que unpad recupere los datos originales.

    Returns:
        None: Se compara con la entrada original.
    """
    data = b"SECRET MESSAGE"
    assert unpad(pad(data, 16)) == data


def test_unpad_empty_fails():
    """Un buffer vacío no tiene relleno que leer.

    Returns:
        None: Se espera InvalidPadding.
    """
    with pytest.raises(InvalidPadding):
        unpad(b"")


def test_unpad_count_larger_than_data_fails():
    """Un último byte mayor que la longitud del buffer es inválido.

    Returns:
        None: Se espera InvalidPadding.
    """
    with pytest.raises(InvalidPadding):
        unpad(b"abc\x05")


def test_unpad_only_checks_last_byte():
    """Sólo se confía en el último byte; los anteriores no se verifican.

    Returns:
        None: Las aserciones documentan la validación parcial.
    """
    assert unpad(b"abcdefgh\x01\x02\x03") == b"abcdefgh"
    assert unpad(b"abc\x00") == b"abc\x00"
