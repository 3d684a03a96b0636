# --------------------------------------------------------------
# File: storage.py
# Description: Almacén en disco de los archivos cifrados con AES-GCM.
# --------------------------------------------------------------
"""Persistencia de blobs cifrados en un directorio inyectado en los servicios.

El nombre de cada blob son los primeros 8 bytes del ciphertext en hexadecimal.
Esos bytes pertenecen al nonce aleatorio, así que las colisiones son muy
improbables pero no imposibles; un hash del contenido completo sería más
seguro, aunque cambiaría los nombres expuestos.
"""

from __future__ import annotations

import logging
import os
from typing import List

from core.errors import StorageError

__all__ = ["EncryptedFileStore", "storage_name"]

logger = logging.getLogger(__name__)

NAME_PREFIX_BYTES = 8
SUFFIX = ".enc"


def storage_name(ciphertext: bytes) -> str:
    """Deriva el nombre de almacenamiento a partir del ciphertext."""

    return f"{ciphertext[:NAME_PREFIX_BYTES].hex()}{SUFFIX}"


class EncryptedFileStore:
    """Directorio de archivos cifrados, creado una vez al arrancar.

    Args:
        directory (str): Ruta del directorio de almacenamiento.

    """

    def __init__(self, directory: str) -> None:
        self.directory = directory
        os.makedirs(directory, mode=0o750, exist_ok=True)

    def path_for(self, name: str) -> str:
        """Devuelve la ruta de `name` rechazando nombres con rutas."""

        if not name or name in (".", "..") or os.path.basename(name) != name or "\\" in name:
            raise StorageError(f"invalid filename: {name!r}")
        return os.path.join(self.directory, name)

    def save(self, ciphertext: bytes) -> str:
        """Guarda el ciphertext aplicando escritura atómica.

        Args:
            ciphertext (bytes): Blob cifrado (nonce || sellado).

        Returns:
            str: Nombre asignado dentro del almacén.

        """

        name = storage_name(ciphertext)
        path = self.path_for(name)
        tmp_path = f"{path}.tmp"
        with open(tmp_path, "wb") as handler:
            handler.write(ciphertext)
        os.replace(tmp_path, path)
        logger.info("Stored encrypted file %s (%d bytes)", name, len(ciphertext))
        return name

    def load(self, name: str) -> bytes:
        """Lee un blob cifrado.

        Raises:
            StorageError: Si el nombre es inválido o el archivo no existe.

        """

        path = self.path_for(name)
        try:
            with open(path, "rb") as handler:
                return handler.read()
        except (FileNotFoundError, IsADirectoryError) as exc:
            raise StorageError(f"file read failed: {name}") from exc

    def list_files(self) -> List[str]:
        """Nombres de los archivos almacenados, ordenados alfabéticamente."""

        return sorted(
            entry.name
            for entry in os.scandir(self.directory)
            if entry.is_file() and not entry.name.endswith(".tmp")
        )
