# mof_screener/charts.py
import plotly.graph_objects as go

from .batch import WUG_COL, WUV_COL
from .config import FAIL_COLOR, PASS_COLOR, TARGET_COLOR
from .models import DOE_TARGETS, ChartDatum, Thresholds


def performance_figure(chart: list[ChartDatum], show_thresholds: bool = True, height: int = 400) -> go.Figure:
    """Predicted values as coloured bars (green pass / red fail), optional grey target bars."""
    names = [d.name for d in chart]
    hover = [
        f"Value: {d.value:.2f}<br>Target: ≥ {d.threshold:g}<br>"
        f"{'Meets Target' if d.is_passing else 'Below Target'}"
        for d in chart
    ]
    fig = go.Figure()
    fig.add_bar(
        x=names, y=[d.value for d in chart], name="Value",
        marker_color=[PASS_COLOR if d.is_passing else FAIL_COLOR for d in chart],
        hovertext=hover, hoverinfo="text",
    )
    if show_thresholds:
        fig.add_bar(
            x=names, y=[d.threshold for d in chart], name="Target",
            marker_color=TARGET_COLOR, opacity=0.5,
        )
    fig.update_layout(
        barmode="group",
        legend=dict(orientation="h"),
        yaxis=dict(gridcolor="#e5e7eb"),
        margin=dict(t=20, r=30, l=0, b=5),
        height=height,
    )
    return fig


def batch_figure(results, label_col: str, thresholds: Thresholds = DOE_TARGETS,
                 show_thresholds: bool = True) -> go.Figure:
    """Grouped bars per candidate for a screened batch frame (values clamped at 0)."""
    labels = results[label_col].astype(str)
    fig = go.Figure()
    fig.add_bar(x=labels, y=results[WUG_COL].clip(lower=0), name="WUG (wt%)")
    fig.add_bar(x=labels, y=results[WUV_COL].clip(lower=0), name="WUV (g/L)")
    fig.update_layout(barmode="group", legend=dict(orientation="h"), height=500,
                      xaxis_title="Candidate", yaxis_title="Predicted working uptake")
    if show_thresholds:
        fig.add_hline(y=thresholds.wug, line_dash="dot", line_color=TARGET_COLOR,
                      annotation_text=f"WUG target {thresholds.wug:g} wt%")
        fig.add_hline(y=thresholds.wuv, line_dash="dash", line_color=TARGET_COLOR,
                      annotation_text=f"WUV target {thresholds.wuv:g} g/L")
    return fig
