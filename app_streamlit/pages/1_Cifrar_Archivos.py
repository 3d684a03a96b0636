# --------------------------------------------------------------
# File: 1_Cifrar_Archivos.py
# Description: Sube archivos para cifrarlos con AES-GCM y los descifra por nombre.
# --------------------------------------------------------------

import streamlit as st

from api.services import decrypt_file, encrypt_file
from core.config import ENCRYPTED_DIR, MAX_FILE_SIZE
from core.errors import CipherError
from core.storage import EncryptedFileStore


@st.cache_resource
def get_store() -> EncryptedFileStore:
    """Crea el almacén una sola vez por proceso de Streamlit."""
    return EncryptedFileStore(ENCRYPTED_DIR)


store = get_store()

st.title("📁 Cifrado de archivos")

tab_enc, tab_dec = st.tabs(["Cifrar", "Descifrar"])

# Cifrado: el archivo se sella con una clave nueva que sólo ve el usuario.
with tab_enc:
    f = st.file_uploader("Selecciona un archivo", type=None)
    st.caption(f"Tamaño máximo: {MAX_FILE_SIZE // (1 << 20)} MiB")
    if f and st.button("Cifrar con AES-GCM"):
        try:
            resp = encrypt_file(f.read(), store)
        except CipherError as exc:
            st.error(f"Encryption failed: {exc}")
        else:
            st.success("Archivo cifrado (AES-GCM-256).")
            st.write("**Nombre cifrado:**", f"`{resp.encrypted_filename}`")
            # SECURITY: la clave no se guarda en ningún sitio; el usuario debe copiarla.
            st.code(resp.key)
            st.caption("Guarda la clave: sin ella el archivo no se puede recuperar.")

# Descifrado: nombre almacenado + clave en Base64.
with tab_dec:
    files = store.list_files()
    filename = st.selectbox("Archivo cifrado", files) if files else None
    key_b64 = st.text_input("Clave (Base64)", type="password")
    if filename and key_b64 and st.button("Descifrar"):
        try:
            data = decrypt_file(filename, key_b64, store)
        except CipherError as exc:
            st.error(f"Decryption failed: {exc}")
        else:
            st.success(f"Archivo descifrado ({len(data)} bytes).")
            st.download_button("Descargar", data=data, file_name="decrypted_file", mime="application/octet-stream")
