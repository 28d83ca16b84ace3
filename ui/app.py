from __future__ import annotations

import os
from typing import Any

import httpx
import pandas as pd
import streamlit as st

_API_BASE = os.getenv("API_BASE_URL", "http://localhost:8000").rstrip("/")
_API_KEY = os.getenv("API_KEY", "")
_PRESETS = {
    "taxId": "Steuer-ID (IdNr)",
    "taxNumber": "Steuernummer",
    "iban": "IBAN",
    "bic": "BIC",
}

st.set_page_config(
    page_title="preset-validation",
    page_icon="✅",
    layout="wide",
    initial_sidebar_state="collapsed",
)


def _request(method: str, path: str, **kwargs: Any) -> Any | None:
    """Call the API; show errors in the page and return None on failure."""
    headers = {"X-API-Key": _API_KEY} if _API_KEY else {}
    try:
        resp = httpx.request(
            method, f"{_API_BASE}{path}", headers=headers, timeout=10, **kwargs
        )
        resp.raise_for_status()
    except httpx.ConnectError:
        st.error(f"API nicht erreichbar unter `{_API_BASE}`. Ist der Server gestartet?")
        return None
    except httpx.HTTPStatusError as exc:
        st.error(f"API-Fehler {exc.response.status_code}: {exc.response.text}")
        return None
    return resp.json()


st.title("✅ preset-validation")

tab_check, tab_offices = st.tabs(["🔍 Prüfen", "🏛️ Finanzämter"])


# ── Prüfen ────────────────────────────────────────────────────────────────────

with tab_check:
    preset: str = st.selectbox(
        "Typ",
        list(_PRESETS),
        format_func=lambda k: _PRESETS[k],
    )
    value: str = st.text_input("Wert", placeholder="z. B. 11/160/87412 oder DE89 3704 0044 0532 0130 00")

    if st.button("Prüfen", type="primary", disabled=not value.strip()):
        if preset == "taxNumber":
            st.session_state.last_check = {
                "preset": preset,
                "data": _request("POST", "/tax-number", json={"value": value}),
            }
        else:
            st.session_state.last_check = {
                "preset": preset,
                "data": _request("POST", "/validate", json={"preset": preset, "value": value}),
            }

    result = st.session_state.get("last_check")
    if result and result["data"] is not None:
        data = result["data"]
        if data["valid"]:
            st.success(f"{_PRESETS[result['preset']]} ist gültig.")
        else:
            st.error(f"{_PRESETS[result['preset']]} ist ungültig.")

        if result["preset"] == "taxNumber":
            st.dataframe(
                pd.DataFrame([
                    {
                        "ELSTER-Format": data["canonical"] or "—",
                        "BUFA": data["regional_code"] or "—",
                        "Bundesland": data["state_name"] or "—",
                        "Grund": data["reason"] or "—",
                    }
                ]),
                width="stretch",
                hide_index=True,
            )


# ── Finanzämter ───────────────────────────────────────────────────────────────

with tab_offices:
    offices = _request("GET", "/tax-offices")
    if offices:
        df_offices = pd.DataFrame(offices).rename(
            columns={
                "code": "BUFA",
                "state_number": "Land",
                "office_number": "Finanzamt",
                "state_name": "Bundesland",
                "procedure": "Prüfziffernverfahren",
            }
        )
        states = sorted(df_offices["Bundesland"].unique())
        selected_states: list[str] = st.multiselect("Bundesland", states, default=states)
        df_selected = df_offices[df_offices["Bundesland"].isin(selected_states)]

        m1, m2 = st.columns(2)
        m1.metric("Finanzämter", len(df_selected))
        m2.metric("Bundesländer", df_selected["Bundesland"].nunique())

        st.dataframe(df_selected, width="stretch", hide_index=True)
        st.subheader("Finanzämter pro Bundesland")
        st.bar_chart(df_selected.groupby("Bundesland").size().rename("Anzahl"))
    elif offices is not None:
        st.info("Keine Finanzämter geladen.")
