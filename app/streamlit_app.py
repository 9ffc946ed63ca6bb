"""
Allokator — Timeline Forecast Dashboard
=======================================

One timeline at a time:
  1. Schedule:  daily scheduled contribution over the jitter window
  2. Rolls:     N sampled (value, date) outcomes with histograms and a summary

Run: streamlit run app/streamlit_app.py
"""

from __future__ import annotations

import datetime as dt
import sys
from pathlib import Path

import altair as alt
import pandas as pd
import streamlit as st

# ---------------------------------------------------------------------------
# Make project root importable
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.config import JITTER_DAYS, RollConfig  # noqa: E402
from engine.runner import simulate_timeline  # noqa: E402
from timelines.contribution import contribution_schedule  # noqa: E402
from timelines.spec import DEFAULT_WEEKS, TimelineSpec  # noqa: E402


# ---------------------------------------------------------------------------
# Chart helpers
# ---------------------------------------------------------------------------
def _fmt_value(val):
    """Format revenue with commas."""
    return f"{val:,.0f}"


def _plot_schedule(schedule: pd.Series, *, title, height=240):
    df = schedule.rename("contribution").reset_index()
    chart = (
        alt.Chart(df).mark_area(opacity=0.6, interpolate="step-after")
        .encode(
            x=alt.X("date:T", title="Date"),
            y=alt.Y("contribution:Q", title="Contribution", axis=alt.Axis(format=",.0f")),
        )
        .properties(title=title, height=height)
    )
    st.altair_chart(chart, use_container_width=True)


def _plot_histogram(df, *, field, field_type, title, x_label, bins=40, height=240):
    if len(df) == 0:
        st.info("No data.")
        return
    if field_type == "T":
        x = alt.X(f"{field}:T", timeUnit="yearmonthdate", title=x_label)
    else:
        x = alt.X(f"{field}:Q", bin=alt.Bin(maxbins=bins), title=x_label)
    chart = (
        alt.Chart(df).mark_bar(opacity=0.8)
        .encode(x=x, y=alt.Y("count()", title="Rolls"))
        .properties(title=title, height=height)
    )
    st.altair_chart(chart, use_container_width=True)


# ---------------------------------------------------------------------------
# Page
# ---------------------------------------------------------------------------
st.set_page_config(page_title="Allokator", layout="wide")
st.title("Allokator")
st.caption("Scheduled contribution and rolled forecast for a single timeline.")

with st.sidebar:
    st.header("Timeline")
    name = st.text_input("Name", value="Project 1")
    start_date = st.date_input("Start date", value=dt.date(2022, 1, 1))
    weeks = st.number_input("Duration (weeks)", min_value=0, max_value=520, value=DEFAULT_WEEKS, step=1)
    revenue = st.number_input("Expected revenue", min_value=0, value=33333, step=1000)

    st.header("Rolls")
    n_rolls = st.slider("Rolls", 100, 20000, 2000, 100)
    jitter_days = st.slider("Jitter (days)", 0, 90, JITTER_DAYS, 1)
    seed = st.number_input("Seed", min_value=0, value=42, step=1)

try:
    timeline = TimelineSpec(
        name=name,
        start_date=start_date,
        weeks=int(weeks),
        revenue=int(revenue),
    ).build()
except ValueError as e:
    st.error(f"Invalid timeline: {e}")
    st.stop()

config = RollConfig(jitter_days=int(jitter_days), n_rolls=int(n_rolls), seed=int(seed))

c1, c2, c3 = st.columns(3)
c1.metric("Start", timeline.start_date.isoformat())
c2.metric("End", timeline.end_date().isoformat())
c3.metric("Expected value", _fmt_value(timeline.expected_value))

# ---------------------------------------------------------------
# Step 1: Schedule
# ---------------------------------------------------------------
st.markdown("#### Scheduled Contribution")
pad = dt.timedelta(days=config.jitter_days)
schedule = contribution_schedule(timeline, timeline.start_date - pad, timeline.end_date() + pad)
_plot_schedule(schedule, title="Daily contribution (scheduled window ± jitter)")

# ---------------------------------------------------------------
# Step 2: Rolls
# ---------------------------------------------------------------
st.markdown("#### Rolled Forecast")

if st.button("Roll", type="primary", use_container_width=True):
    with st.spinner(f"Sampling {config.n_rolls} rolls..."):
        rolls = simulate_timeline(timeline, config)
    st.session_state["rolls"] = {"timeline": timeline, "config": config, "rolls": rolls}

state = st.session_state.get("rolls")
if state is not None and state["timeline"] == timeline and state["config"] == config:
    rolls = state["rolls"]
    df = rolls.to_dataframe()

    h1, h2 = st.columns(2)
    with h1:
        _plot_histogram(df, field="value", field_type="Q", title="Sampled value", x_label="Value", bins=30)
    with h2:
        _plot_histogram(df, field="date", field_type="T", title="Sampled date", x_label="Date")

    st.markdown("**Summary**")
    st.dataframe(rolls.summary().round(2), use_container_width=True, hide_index=True)

    st.markdown("**Multiplier frequencies**")
    freq = rolls.multiplier_frequencies(config.value_multipliers).reset_index()
    st.dataframe(freq, use_container_width=True, hide_index=True)

    with st.expander("Raw rolls"):
        st.dataframe(df.head(500), use_container_width=True, hide_index=True)
else:
    st.info("Click 'Roll' to sample outcomes for this timeline.")
