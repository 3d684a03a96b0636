# --------------------------------------------------------------
# File: test_heuristic.py
# Description: Pruebas de la heurística de texto legible.
# --------------------------------------------------------------

import pytest

from core.heuristic import is_meaningful_text


@pytest.mark.parametrize(
    "text",
    ["HELLO WORLD", "SECRET MESSAGE", "hola mundo", "a b c d e f"],
)
def test_meaningful_text_accepted(text):
    """Textos con letras y espacios se aceptan.

    Returns:
        None: La heurística debe devolver True.
    """
    assert is_meaningful_text(text)


@pytest.mark.parametrize(
    "text",
    [
        "##$$%%^^",  # sin letras
        "hi",  # demasiado corto
        "HELLOWORLD",  # sin espacio
        "12 34 56 ab",  # pocas letras
        "hello\x00world x",  # carácter de control
        "héllo wörld",  # fuera de ASCII
        "",
    ],
)
def test_meaningless_text_rejected(text):
    """Textos cortos, sin espacios, con pocas letras o no ASCII se rechazan.

    Returns:
        None: La heurística debe devolver False.
    """
    assert not is_meaningful_text(text)


def test_half_letters_is_not_enough():
    """Exactamente la mitad de letras no basta: debe superar la mitad.

    Returns:
        None: Se comparan casos límite.
    """
    assert not is_meaningful_text("abc 12")
    assert is_meaningful_text("abcd 1")
