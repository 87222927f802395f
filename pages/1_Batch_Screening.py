# pages/1_Batch_Screening.py
import streamlit as st
from pydantic import ValidationError

from mof_screener.batch import BatchInputError, Columns, read_candidates, screen_frame, summarize, with_labels
from mof_screener.charts import batch_figure
from mof_screener.config import FIELDS

st.title("Batch Screening")
st.write("Upload a CSV of candidate materials; every row is screened with the same equations.")

st.markdown("### 1) Upload CSV")
up = st.file_uploader("CSV with headers", type=["csv"])

st.markdown("### 2) Map columns (if needed)")
cform = st.form("colmap")
mapped = {}
c1, c2 = cform.columns(2)
for i, (field, meta) in enumerate(FIELDS.items()):
    mapped[field] = (c1 if i % 2 == 0 else c2).text_input(f"{meta['label']} column", field)
name_col = cform.text_input("Name column (optional)", "name")
submitted = cform.form_submit_button("Screen")

if up and submitted:
    try:
        df = read_candidates(up)
    except BatchInputError as e:
        st.error(str(e)); st.stop()

    try:
        cols = Columns(**mapped, name=name_col if name_col in df.columns else None)
    except ValidationError as e:
        st.error(str(e)); st.stop()

    try:
        results = screen_frame(df, cols)
    except BatchInputError as e:
        st.error(str(e)); st.stop()

    st.session_state["batch_results"] = results

if "batch_results" in st.session_state:
    results = st.session_state["batch_results"]
    s = summarize(results)

    m1, m2, m3, m4 = st.columns(4)
    m1.metric("Candidates", s["candidates"])
    m2.metric("Pass WUG", s["wug_pass"])
    m3.metric("Pass WUV", s["wuv_pass"])
    m4.metric("Promising", s["overall_pass"], f"{s['pass_rate']:.0%}")

    show = st.sidebar.toggle("Show targets", value=True)
    results, label_col = with_labels(results)
    st.plotly_chart(batch_figure(results, label_col, show_thresholds=show), width="stretch")
    st.dataframe(results, width="stretch")

    st.download_button("⬇️ Download screening results CSV",
        results.to_csv(index=False).encode(),
        "batch_screening.csv", "text/csv")
