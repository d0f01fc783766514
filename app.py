"""Streamlit UI for desk layout with CSV previews and validations."""
from __future__ import annotations

# Add src to sys.path so desk_layout can be found
import sys
import os
import io
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

import pandas as pd
import streamlit as st
import streamlit.components.v1 as components

from desk_layout.csv_loader import PEOPLE_COLUMNS, TEAM_COLUMNS, layout_to_frame, load_all
from desk_layout.desk_map import generate_desk_map
from desk_layout.models import parse_dog_status
from desk_layout.solver import calculate_desk_layout, compute_layout_stats, grade_layout

# -----------------------------
# Helpers
# -----------------------------

def df_to_csvio(df: pd.DataFrame) -> io.StringIO:
    """Serialize a DataFrame to a StringIO CSV buffer positioned at start."""
    buf = io.StringIO()
    df.to_csv(buf, index=False)
    buf.seek(0)
    return buf

def validate_columns(df: pd.DataFrame, required: list[str], file_label: str) -> bool:
    """Check required columns and show an error if any are missing."""
    missing = [col for col in required if col not in df.columns]
    if missing:
        st.error(f"Error in {file_label}: missing columns: {', '.join(missing)}")
        return False
    return True

def validate_dog_statuses(people_df: pd.DataFrame) -> bool:
    """Ensure every dog_status is AVOID, LIKE or HAVE."""
    bad_rows = []
    for idx, row in people_df.iterrows():
        try:
            parse_dog_status(row["dog_status"])
        except ValueError:
            bad_rows.append((idx, row["dog_status"]))
    if bad_rows:
        st.error(
            "Error: unknown dog_status values: "
            + ", ".join([f"row {i+2}: {v}" for i, v in bad_rows])
            + ". Use AVOID, LIKE or HAVE."
        )
        return False
    return True

# -----------------------------
# Sidebar options
# -----------------------------

st.sidebar.header("Map Options")
desks_per_row = st.sidebar.number_input(
    "Desks per row in map",
    min_value=1,
    max_value=50,
    value=12,
    help="Wrap the desk line onto a new row after this many desks.",
)
show_map = st.sidebar.checkbox("Show desk map", value=True)

# -----------------------------
# Main UI and previews
# -----------------------------

st.title("Desk Layout")

_people_file = st.file_uploader("People CSV", type="csv")
_teams_file = st.file_uploader("Teams CSV (optional)", type="csv")

people_df = teams_df = None
people_valid = False
teams_valid = True

if _people_file is not None:
    people_df = pd.read_csv(_people_file, dtype=str)
    st.subheader("People preview")
    st.dataframe(people_df, use_container_width=True)
    people_valid = validate_columns(people_df, PEOPLE_COLUMNS, "people.csv")
    if people_valid:
        people_valid = validate_dog_statuses(people_df)

if _teams_file is not None:
    teams_df = pd.read_csv(_teams_file, dtype=str)
    st.subheader("Teams preview")
    st.dataframe(teams_df, use_container_width=True)
    teams_valid = validate_columns(teams_df, TEAM_COLUMNS, "teams.csv")

# -----------------------------
# Run button
# -----------------------------

run_disabled = not (people_valid and teams_valid)
run_clicked = st.button("Run layout", disabled=run_disabled, key="run_layout_button")

# -----------------------------
# Layout
# -----------------------------

if run_clicked and not run_disabled:
    try:
        people = load_all(
            df_to_csvio(people_df),
            df_to_csvio(teams_df) if teams_df is not None else None,
        )
        layout = calculate_desk_layout(people)

        result_df = layout_to_frame(layout)
        st.subheader("Desk order")
        st.dataframe(result_df, use_container_width=True)

        report = grade_layout(compute_layout_stats(layout))
        st.subheader("Layout report")
        st.dataframe(pd.DataFrame([report]), use_container_width=True)

        csv_bytes = result_df.to_csv(index=False).encode("utf-8")
        st.download_button(
            "Download layout as CSV",
            csv_bytes,
            file_name="layout.csv",
        )

        if show_map:
            st.subheader("Desk Map")
            html = generate_desk_map(layout, desks_per_row=int(desks_per_row))
            components.html(html, height=550, scrolling=True)

    except ValueError as e:
        st.error(f"Input validation error: {e}")
        st.stop()
