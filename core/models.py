# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Modelos Pydantic que encapsulan estructuras de intercambio criptográfico."""

from typing import List, Optional

from pydantic import BaseModel


class CipherResult(BaseModel):
    """Representa el resultado de una operación de cifrado.

    Attributes:
        ciphertext (bytes): Datos cifrados; en GCM incluye nonce y tag.
        key (bytes): Clave de 256 bits generada para esta operación.

    """

    ciphertext: bytes
    key: bytes


class BruteForceResult(BaseModel):
    """Clave recuperada por fuerza bruta y el texto que descifra.

    Attributes:
        plaintext (bytes): Mensaje en claro aceptado por la heurística.
        key (bytes): Clave completa (prefijo conocido + sufijo encontrado).
        candidates_tried (int): Candidatos evaluados hasta el acierto.

    """

    plaintext: bytes
    key: bytes
    candidates_tried: int


# Modelos de la frontera Base64 usados por la capa de servicios.


class FileEncryptResponse(BaseModel):
    encrypted_filename: str
    key: str
    timestamp: int


class FileDecryptRequest(BaseModel):
    filename: str
    key: str


class TextEncryptRequest(BaseModel):
    text: str
    mode: str


class TextEncryptResponse(BaseModel):
    ciphertext: str
    key: str
    mode: str
    timestamp: int


class TextDecryptRequest(BaseModel):
    ciphertext: str
    key: str
    mode: str


class TextDecryptResponse(BaseModel):
    plaintext: str
    timestamp: int


class BruteForceRequest(BaseModel):
    ciphertext: str
    known_key_part: str
    mode: str = "ecb"


class BruteForceResponse(BaseModel):
    """Respuesta de la fuerza bruta; `error` sólo aparece si no hubo éxito."""

    plaintext: Optional[str] = None
    key: Optional[str] = None
    error: Optional[str] = None
    time_taken: Optional[str] = None


class FileListResponse(BaseModel):
    files: List[str]
