# --------------------------------------------------------------
# File: heuristic.py
# Description: Heurística para decidir si un texto descifrado parece legible.
# --------------------------------------------------------------
"""Clasifica un candidato descifrado como texto con sentido o como basura."""

import re

MIN_LENGTH = 5

LETTER = re.compile(r"[A-Za-z]")


def is_meaningful_text(text: str) -> bool:
    """Indica si `text` parece un mensaje legible en ASCII.

    Exige al menos 5 caracteres, todos ASCII imprimibles (32-126), más de la
    mitad letras y al menos un espacio. Los textos cortos o con mucha
    puntuación dan falsos negativos.

    Args:
        text (str): Candidato descifrado.

    Returns:
        bool: ``True`` si supera todas las condiciones.

    """

    if len(text) < MIN_LENGTH:
        return False
    if any(ord(char) < 32 or ord(char) > 126 for char in text):
        return False
    letters = len(LETTER.findall(text))
    return letters > len(text) / 2 and " " in text
