"""CSV Workout Uploader — Streamlit page.

Run with:
    streamlit run streamlit_app/app.py

Pick a CSV plan, preview the converted workouts, download their Garmin
JSON or push them to Garmin Connect.
"""

from __future__ import annotations

import streamlit as st

from garmin_client import (
    GarminClient,
    GarminCredentialsMissing,
    GarminMFARequired,
    complete_mfa_login,
)
from workout_converter import convert_csv_text, get_dialect
from workout_converter.dialects import available_dialects
from workout_converter.models.steps import RepeatGroup
from workout_converter.serialization import to_garmin_json, to_garmin_json_string

from helpers import (
    STEP_COLORS,
    describe_step,
    format_distance,
    format_duration,
)

_MFA_KEYS = ("garmin_mfa_pending", "garmin_mfa_client", "garmin_mfa_state", "garmin_mfa_token_dir")

st.set_page_config(page_title="CSV Workout Uploader", page_icon="🏃", layout="wide")


def _render_steps(steps, indent: int = 0):
    """Render workout steps with color-coded bars."""
    for step in steps:
        color = STEP_COLORS.get(step.kind, "#CCCCCC")
        prefix = "&nbsp;" * (indent * 6)
        st.markdown(
            f'{prefix}<div style="background:{color};padding:6px 12px;'
            f'border-radius:4px;margin:2px 0;display:inline-block;width:100%;">'
            f'<strong>#{step.step_id}</strong> {describe_step(step)}</div>',
            unsafe_allow_html=True,
        )
        if isinstance(step, RepeatGroup):
            _render_steps(step.children, indent=indent + 1)


# ---------------------------------------------------------------------------
# Sidebar — Garmin connection
# ---------------------------------------------------------------------------

st.sidebar.title("Garmin Connect")

if st.session_state.get("garmin_client") is not None:
    st.sidebar.success("Connected to Garmin")
    if st.sidebar.button("Disconnect"):
        st.session_state.pop("garmin_client", None)
        st.rerun()
elif st.session_state.get("garmin_mfa_pending"):
    st.sidebar.info("Garmin sent a verification code to your email. Enter it below.")
    mfa_code = st.sidebar.text_input("MFA Code", key="garmin_mfa_code")
    if st.sidebar.button("Verify"):
        try:
            authed = complete_mfa_login(
                st.session_state["garmin_mfa_client"],
                st.session_state["garmin_mfa_state"],
                mfa_code,
                st.session_state["garmin_mfa_token_dir"],
            )
            st.session_state["garmin_client"] = GarminClient.from_garmin(
                authed, st.session_state["garmin_mfa_token_dir"]
            )
            for k in _MFA_KEYS:
                st.session_state.pop(k, None)
            st.rerun()
        except Exception as e:
            st.sidebar.error(f"MFA verification failed: {e}")
    if st.sidebar.button("Cancel"):
        for k in _MFA_KEYS:
            st.session_state.pop(k, None)
        st.rerun()
else:
    garmin_email = st.sidebar.text_input("Email", key="garmin_email")
    garmin_password = st.sidebar.text_input("Password", type="password", key="garmin_password")
    if st.sidebar.button("Connect"):
        try:
            st.session_state["garmin_client"] = GarminClient(
                email=garmin_email, password=garmin_password
            )
            st.rerun()
        except GarminMFARequired as mfa_exc:
            st.session_state["garmin_mfa_pending"] = True
            st.session_state["garmin_mfa_client"] = getattr(mfa_exc, "garmin_client", None)
            st.session_state["garmin_mfa_state"] = getattr(mfa_exc, "mfa_state", None)
            st.session_state["garmin_mfa_token_dir"] = getattr(mfa_exc, "token_dir", None)
            st.rerun()
        except GarminCredentialsMissing:
            st.sidebar.warning("Enter email and password")
        except Exception as e:
            st.sidebar.error(f"Connection failed: {e}")

# ---------------------------------------------------------------------------
# Main — CSV upload and preview
# ---------------------------------------------------------------------------

st.title("CSV Workout Uploader")

uploaded = st.file_uploader("Training plan (.csv)", type=["csv"])
dialect_name = st.radio("Delimiter", available_dialects(), horizontal=True)

if uploaded is None:
    st.info("Choose a CSV file to get started.")
    st.stop()

text = uploaded.getvalue().decode("utf-8", errors="replace")
result = convert_csv_text(text, get_dialect(dialect_name))

for diag in result.diagnostics:
    st.warning(diag.message)

if result.is_empty:
    st.error("No workouts found in this file.")
    st.stop()

st.caption(f"{len(result.documents)} workouts — {result.sport_mode.name.lower()}")

for i, document in enumerate(result.documents):
    with st.expander(document.name, expanded=i == 0):
        c1, c2 = st.columns(2)
        c1.metric("Duration", format_duration(document.estimated_duration_sec))
        c2.metric("Distance", format_distance(document.estimated_distance_m))
        _render_steps(document.steps)
        st.download_button(
            "Download Garmin Workout (.json)",
            data=to_garmin_json_string(document),
            file_name=f"{document.name[:32].replace(' ', '_')}.json",
            mime="application/json",
            key=f"download_{i}",
        )

gc = st.session_state.get("garmin_client")
if gc is not None and st.button("Push all to Garmin", type="primary"):
    with st.spinner("Uploading..."):
        uploads = gc.upload_workouts(to_garmin_json(d) for d in result.documents)
    for upload in uploads:
        if upload.ok:
            st.success(f"{upload.workout_name}: workout #{upload.workout_id}")
        else:
            st.error(f"{upload.workout_name}: {upload.error}")
