"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd
from typing import Optional


def render_styled_table(
    df: pd.DataFrame,
    title: Optional[str] = None,
    height: Optional[int] = None,
    use_container_width: bool = True,
):
    """Render a styled, non-editable dataframe."""
    if title:
        st.subheader(title)
    st.dataframe(df, height=height, use_container_width=use_container_width, hide_index=True)


def render_move_plan_table(df: pd.DataFrame, type_column: str = "Type"):
    """Render move plan steps with swap groups and departures highlighted."""
    def color_type(val):
        if val == "Swap":
            return "background-color: #fff3cd; color: #856404; font-weight: bold"
        elif val == "Departure":
            return "background-color: #ffcccc; color: #cc0000"
        elif val == "Arrival":
            return "background-color: #d4edda; color: #155724"
        return ""

    if type_column in df.columns:
        styled = df.style.map(color_type, subset=[type_column])
        st.dataframe(styled, use_container_width=True, hide_index=True)
    else:
        st.dataframe(df, use_container_width=True, hide_index=True)
