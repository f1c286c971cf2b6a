"""
Visualization utilities for the NPDB malpractice report
"""

import plotly.graph_objects as go
import pandas as pd
import warnings
from typing import Optional

from config.npdb import CHART_COLORS, PLOTLY_THEME, MISSING_GROUP_LABEL

# Suppress specific warnings
warnings.filterwarnings('ignore', category=FutureWarning, module='plotly')


def category_labels(index: pd.Index) -> list:
    """Group keys as display strings; missing keys become MISSING_GROUP_LABEL"""
    return [MISSING_GROUP_LABEL if pd.isna(key) else str(key) for key in index]


def format_value(value, value_format: str = ',.0f', prefix: str = '') -> str:
    """Bar annotation text; missing values read 'n/a'"""
    if pd.isna(value):
        return 'n/a'
    return f'{prefix}{value:{value_format}}'


def create_aggregate_bar_chart(aggregate: pd.Series, title: str,
                               xaxis_title: Optional[str] = None,
                               yaxis_title: Optional[str] = None,
                               value_format: str = ',.0f',
                               value_prefix: str = '',
                               color: str = CHART_COLORS[0]) -> go.Figure:
    """
    Create a bar chart from a grouped aggregate

    Args:
        aggregate: Series indexed by group key (output of count_by / mean_by)
        title: Chart title
        xaxis_title: X-axis title (defaults to the index name)
        yaxis_title: Y-axis title (defaults to the series name)
        value_format: Format spec for the bar annotations
        value_prefix: Text placed before each annotation (e.g. '$')
        color: Bar color

    Returns:
        Plotly figure (no traces if the aggregate is empty)
    """
    fig = go.Figure()

    if len(aggregate) > 0:
        fig.add_trace(go.Bar(
            x=category_labels(aggregate.index),
            y=aggregate.values,
            marker=dict(color=color),
            text=[format_value(v, value_format, value_prefix) for v in aggregate.values],
            textposition='outside',
            cliponaxis=False
        ))

    fig.update_layout(
        title=title,
        xaxis_title=xaxis_title if xaxis_title is not None else aggregate.index.name,
        yaxis_title=yaxis_title if yaxis_title is not None else aggregate.name,
        template=PLOTLY_THEME,
        height=450,
        showlegend=False,
        xaxis_tickangle=-45
    )

    return fig
