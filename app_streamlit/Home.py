# --------------------------------------------------------------
# File: Home.py
# Description: Define la página principal de Streamlit con el resumen del flujo.
# --------------------------------------------------------------

import streamlit as st

from core.config import ENCRYPTED_DIR, configure_logging

configure_logging()

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="AES Lab", page_icon="🔐", layout="centered")

# Presenta el nombre del producto y su propósito general.
st.title("🔐 AES Lab")
st.write(
    "Cifra archivos con AES-256-GCM, cifra texto con GCM o ECB y prueba a "
    "recuperar claves ECB por fuerza bruta conociendo parte de la clave."
)
st.info(f"Los archivos cifrados se guardan en `{ENCRYPTED_DIR}`.")
st.warning("ECB no ofrece integridad y revela bloques repetidos: úsalo sólo para experimentar.")
