# --------------------------------------------------------------
# File: 2_Archivos_Cifrados.py
# Description: Lista los archivos cifrados y permite descargarlos sin descifrar.
# --------------------------------------------------------------

import streamlit as st

from api.services import list_encrypted_files, read_encrypted_file
from core.config import ENCRYPTED_DIR
from core.errors import CipherError
from core.storage import EncryptedFileStore


@st.cache_resource
def get_store() -> EncryptedFileStore:
    """Crea el almacén una sola vez por proceso de Streamlit."""
    return EncryptedFileStore(ENCRYPTED_DIR)


store = get_store()

st.title("🗂️ Archivos cifrados")

listing = list_encrypted_files(store)
if not listing.files:
    st.info("No hay archivos almacenados aún. Ve a **Cifrar Archivos** para añadir alguno.")
    st.stop()

for name in listing.files:
    col_name, col_btn = st.columns([3, 1])
    col_name.write(f"`{name}`")
    try:
        blob = read_encrypted_file(name, store)
    except CipherError as exc:
        col_btn.error(str(exc))
        continue
    col_btn.download_button("Descargar", data=blob, file_name=name, mime="application/octet-stream", key=f"dl_{name}")
