import asyncio

import pandas as pd
import streamlit as st

from linechart.load_test_data import load_synthetic_series
from linechart.renderer import render_linechart
from linechart.series import normalize_series, records_to_frame, series_from_frame
from linechart.settings import configure_logging

configure_logging()


# ---------------------------------------------------------
# Column helpers
# ---------------------------------------------------------
def numeric_columns(df: pd.DataFrame):
    return [col for col in df.columns if pd.api.types.is_numeric_dtype(df[col])]


def detect_x_type(df: pd.DataFrame, column):
    if pd.api.types.is_datetime64_any_dtype(df[column]):
        return "temporal"
    if pd.api.types.is_numeric_dtype(df[column]):
        return "quantitative"
    return "ordinal"


# ---------------------------------------------------------
# Engine wrapper
# ---------------------------------------------------------
def run_engine(df: pd.DataFrame, x, y, by, opts):
    series = series_from_frame(df, x=x, y=y, by=by)

    chart_area = st.container()
    asyncio.run(render_linechart({"values": series}, chart_area, opts))

    with st.expander("Chart Data"):
        st.dataframe(records_to_frame(normalize_series(series)))


# ---------------------------------------------------------
# Streamlit UI
# ---------------------------------------------------------
def main():
    st.set_page_config(
        page_title="Line Chart",
        layout="wide",
        initial_sidebar_state="collapsed"
    )

    st.title("Interactive Line Chart")
    st.markdown("Hover over the chart to highlight the nearest point.")

    st.subheader("1. Data Source")
    use_demo = st.checkbox("Use synthetic demo data", value=True)

    df = None
    if use_demo:
        df = load_synthetic_series(seed=7)
    else:
        uploaded = st.file_uploader("Select a CSV file", type=["csv"])
        if uploaded is not None:
            try:
                df = pd.read_csv(uploaded)
            except (ValueError, pd.errors.ParserError) as e:
                st.error(f"Error reading file: {e}")

    if df is None:
        st.info("Upload a CSV file or enable demo data.")
        return

    st.subheader("2. Columns")
    columns = list(df.columns)
    numeric = numeric_columns(df)
    if not numeric:
        st.error("The table has no numeric column to plot.")
        return

    x = st.selectbox("X column", columns, index=columns.index("x") if "x" in columns else 0)
    y_choices = [c for c in numeric if c != x]
    if not y_choices:
        st.error("Pick an x column that leaves a numeric column for y.")
        return
    y = st.selectbox("Y column", y_choices, index=y_choices.index("y") if "y" in y_choices else 0)
    by_choices = ["(none)"] + [c for c in columns if c not in (x, y)]
    by = st.selectbox("Series column", by_choices, index=by_choices.index("series") if "series" in by_choices else 0)

    opts = {
        "xLabel": st.text_input("X label", value="Index"),
        "yLabel": st.text_input("Y label", value="Value"),
        "xType": detect_x_type(df, x),
    }

    st.subheader("3. Chart")
    run_engine(df, x, y, None if by == "(none)" else by, opts)


if __name__ == "__main__":
    main()
