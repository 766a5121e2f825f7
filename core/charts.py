from __future__ import annotations

from typing import Any, Dict

import altair as alt
import pandas as pd

alt.data_transformers.disable_max_rows()

SEMESTER_COLORS = {"Semester 1 Hours": "#2563EB", "Semester 2 Hours": "#F59E0B"}


def to_vega_spec(chart: alt.Chart) -> Dict[str, Any]:
    """Altair chart -> Vega-Lite spec dict the site renders client-side."""
    return chart.to_dict()


def hours_by_member_chart(hours_df: pd.DataFrame) -> Dict[str, Any]:
    """Stacked semester bars per member from the hours table frame."""
    long_df = hours_df.melt(
        id_vars="Member Name",
        value_vars=list(SEMESTER_COLORS),
        var_name="semester",
        value_name="hours",
    )
    chart = (
        alt.Chart(long_df)
        .mark_bar()
        .encode(
            x=alt.X("sum(hours):Q", title="Hours", stack="zero"),
            y=alt.Y("Member Name:N", title=None, sort="-x"),
            color=alt.Color(
                "semester:N",
                title="Semester",
                scale=alt.Scale(domain=list(SEMESTER_COLORS), range=list(SEMESTER_COLORS.values())),
            ),
            tooltip=[
                alt.Tooltip("Member Name:N", title="Member"),
                alt.Tooltip("semester:N", title="Semester"),
                alt.Tooltip("hours:Q", title="Hours", format=".1f"),
            ],
        )
    )
    return to_vega_spec(chart)
