# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para aislar el almacén de archivos cifrados.
# --------------------------------------------------------------

import importlib
from typing import Iterator

import pytest

from core.storage import EncryptedFileStore


@pytest.fixture(autouse=True)
def _isolate_storage(tmp_path, monkeypatch) -> Iterator[None]:
    """Aísla ENCRYPTED_DIR y recarga core.config para cada prueba.

    Args:
        tmp_path (Path): Carpeta temporal proporcionada por pytest.
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    monkeypatch.setenv("ENCRYPTED_DIR", str(tmp_path / "encrypted"))
    monkeypatch.delenv("BRUTEFORCE_TIMEOUT", raising=False)

    import core.config as config_module

    importlib.reload(config_module)

    yield
    # tmp_path se limpia automáticamente por pytest


@pytest.fixture
def store(tmp_path) -> EncryptedFileStore:
    """Almacén de archivos cifrados sobre un directorio temporal.

    Args:
        tmp_path (Path): Carpeta temporal proporcionada por pytest.

    Returns:
        EncryptedFileStore: Almacén vacío listo para usar.
    """
    return EncryptedFileStore(str(tmp_path / "encrypted"))
