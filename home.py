# home.py
import logging

import streamlit as st

from mof_screener import ScreenerSession
from mof_screener.charts import performance_figure
from mof_screener.config import FIELDS, LOG_FORMAT, PAGE_ICON, PAGE_TITLE, WUG_UNIT, WUV_UNIT
from mof_screener.report import metrics_frame, parameters_json

st.set_page_config(page_title=PAGE_TITLE, page_icon=PAGE_ICON, layout="wide")
logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)

# -------------------------
# Session: one screener per browser session
# -------------------------
if "screener" not in st.session_state:
    st.session_state["screener"] = ScreenerSession()
session = st.session_state["screener"]


def _key(field):
    return f"field_{field}"


def _on_change(field):
    session.set_field(field, st.session_state[_key(field)])
    # show what was actually used (e.g. "abc" -> 0)
    st.session_state[_key(field)] = f"{getattr(session.inputs, field):g}"


for field in FIELDS:
    if _key(field) not in st.session_state:
        st.session_state[_key(field)] = f"{getattr(session.inputs, field):g}"

# -------------------------
# Header
# -------------------------
st.title("🧪 MOF Screener")
st.write("Predict Working Uptake Gravimetric & Volumetric")
t = session.thresholds
st.info(f"DOE Targets: {t.wug:g} wt% & {t.wuv:g} g/L")

left, right = st.columns([5, 7], gap="large")

# -------------------------
# Inputs
# -------------------------
with left:
    with st.container(border=True):
        st.subheader("🧫 Geometric Factors")
        for field, meta in FIELDS.items():
            st.text_input(f"{meta['label']} ({meta['unit']})", key=_key(field),
                          on_change=_on_change, args=(field,))

# -------------------------
# Results
# -------------------------
result = session.result
out, verdict = result.outputs, result.verdict

with right:
    with st.container(border=True):
        h1, h2 = st.columns([3, 2])
        h1.subheader("Screening Result")
        h1.caption("Based on Department of Energy targets")
        if verdict.is_overall_passing:
            h2.success("Promising Candidate", icon="✅")
        else:
            h2.error("Does Not Meet Targets", icon="❌")

        m1, m2 = st.columns(2)
        m1.metric("Working Uptake Gravimetric", f"{out.wug:.2f} {WUG_UNIT}")
        m1.caption(f"Target: ≥ {t.wug:g} {WUG_UNIT} · {'✅ Pass' if verdict.is_wug_passing else '❌ Fail'}")
        m2.metric("Working Uptake Volumetric", f"{out.wuv:.2f} {WUV_UNIT}")
        m2.caption(f"Target: ≥ {t.wuv:g} {WUV_UNIT} · {'✅ Pass' if verdict.is_wuv_passing else '❌ Fail'}")

    with st.container(border=True):
        c1, c2 = st.columns([3, 1])
        c1.subheader("Performance vs Targets")
        session.show_thresholds = c2.toggle("Show targets", value=True, key="show_targets")
        st.plotly_chart(performance_figure(session.chart_data(), session.show_thresholds),
                        width="stretch")

    d1, d2 = st.columns(2)
    d1.download_button("⬇️ Metrics CSV", metrics_frame(result).to_csv(index=False),
                       file_name="mof_screening.csv", mime="text/csv")
    d2.download_button("⬇️ Parameters JSON", parameters_json(result),
                       file_name="parameters.json", mime="application/json")

st.caption("Negative predictions are drawn as 0 in the chart; pass/fail always uses the predicted value.")
