# --------------------------------------------------------------
# File: 3_Cifrar_Texto.py
# Description: Cifra y descifra texto en modo GCM o ECB desde Streamlit.
# --------------------------------------------------------------

import streamlit as st

from api.services import decrypt_text, encrypt_text
from core.config import SUPPORTED_MODES
from core.errors import CipherError
from core.models import TextDecryptRequest, TextEncryptRequest

st.title("📝 Cifrado de texto")

tab_enc, tab_dec = st.tabs(["Cifrar", "Descifrar"])

with tab_enc:
    text = st.text_area("Texto en claro")
    mode = st.radio("Modo", SUPPORTED_MODES, horizontal=True, key="enc_mode")
    if st.button("Cifrar", key="btn_encrypt"):
        try:
            resp = encrypt_text(TextEncryptRequest(text=text, mode=mode))
        except CipherError as exc:
            st.error(f"Encryption failed: {exc}")
        else:
            st.write("**Ciphertext:**")
            st.code(resp.ciphertext)
            st.write("**Clave:**")
            st.code(resp.key)

with tab_dec:
    ciphertext = st.text_area("Ciphertext (Base64)")
    key_b64 = st.text_input("Clave (Base64)", type="password")
    mode_d = st.radio("Modo", SUPPORTED_MODES, horizontal=True, key="dec_mode")
    if st.button("Descifrar", key="btn_decrypt"):
        try:
            resp = decrypt_text(TextDecryptRequest(ciphertext=ciphertext, key=key_b64, mode=mode_d))
        except CipherError as exc:
            st.error(f"Decryption failed: {exc}")
        else:
            st.success("Texto descifrado.")
            st.code(resp.plaintext)
