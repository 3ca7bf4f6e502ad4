import os

import requests
import streamlit as st
import streamlit.components.v1 as components

API = os.getenv("HEATMAP_API", "http://localhost:8000").rstrip("/")
REQUEST_TIMEOUT = int(os.getenv("HEATMAP_REQUEST_TIMEOUT", "60"))

if "use_demo" not in st.session_state:
    st.session_state["use_demo"] = False

st.set_page_config(page_title="Global Temperature Heatmap", layout="wide")

st.sidebar.title("Chart options")
use_demo = st.sidebar.toggle(
    "Synthetic demo data",
    value=st.session_state["use_demo"],
    help="Skip the remote dataset and render a generated series.",
)
st.session_state["use_demo"] = use_demo
width = st.sidebar.slider("Chart width (px)", min_value=800, max_value=1800, value=1200, step=50)
height = st.sidebar.slider("Chart height (px)", min_value=400, max_value=900, value=600, step=50)

st.title("Monthly global land-surface temperature")
st.caption("Each cell is one month; colour buckets the absolute temperature. Hover a cell for details.")

params = {"use_demo": use_demo}
try:
    summary_resp = requests.get(f"{API}/summary", params=params, timeout=REQUEST_TIMEOUT)
    summary_resp.raise_for_status()
    summary = summary_resp.json()
except requests.exceptions.RequestException as exc:
    st.error(f"Could not reach the heatmap API at {API}: {exc}")
    st.stop()

st.subheader(summary["description"])
col_records, col_min, col_max = st.columns(3)
col_records.metric("Monthly records", f"{summary['record_count']:,}")
if summary["record_count"]:
    col_min.metric("Coldest month", f"{summary['min_temperature']:.2f} ℃")
    col_max.metric("Warmest month", f"{summary['max_temperature']:.2f} ℃")
else:
    st.warning("The dataset has no monthly records.")

try:
    chart_resp = requests.get(
        f"{API}/chart",
        params={**params, "width": width, "height": height},
        timeout=REQUEST_TIMEOUT,
    )
    chart_resp.raise_for_status()
except requests.exceptions.RequestException as exc:
    st.error(f"Chart request failed: {exc}")
    st.stop()

components.html(chart_resp.text, height=height + 160, scrolling=True)
