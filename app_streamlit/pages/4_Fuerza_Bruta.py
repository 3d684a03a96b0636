# --------------------------------------------------------------
# File: 4_Fuerza_Bruta.py
# Description: Recupera claves ECB conocida una parte de la clave.
# --------------------------------------------------------------

import streamlit as st

from api.services import brute_force
from core.config import BRUTEFORCE_TIMEOUT
from core.errors import CipherError
from core.models import BruteForceRequest

st.title("🔓 Fuerza bruta (ECB)")
st.write(
    "Introduce un ciphertext ECB y los primeros bytes de su clave (28 a 31 bytes en Base64). "
    "Se prueban los bytes que faltan hasta obtener un texto legible."
)
st.caption(
    f"Ventanas: 1-2 bytes → 0-255 por byte, 3 bytes → 0-31, 4 bytes → 0-15. "
    f"Plazo máximo: {BRUTEFORCE_TIMEOUT:.0f} s."
)

ciphertext = st.text_area("Ciphertext (Base64)")
known = st.text_input("Parte conocida de la clave (Base64)")

if st.button("Iniciar búsqueda", disabled=not (ciphertext and known)):
    with st.spinner("Buscando..."):
        try:
            resp = brute_force(BruteForceRequest(ciphertext=ciphertext, known_key_part=known))
        except CipherError as exc:
            st.error(str(exc))
            st.stop()
    if resp.error:
        st.error(f"{resp.error} ({resp.time_taken})")
    else:
        st.success(f"Clave encontrada en {resp.time_taken}")
        st.write("**Texto:**")
        st.code(resp.plaintext)
        st.write("**Clave:**")
        st.code(resp.key)
