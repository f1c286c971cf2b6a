"""
Static (PNG) versions of the report bar charts

Uses the non-interactive Agg backend so figures render in terminals and CI.
"""

from pathlib import Path
from typing import Optional

import pandas as pd

# Use non-interactive backend BEFORE importing pyplot
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import seaborn as sns

from config.npdb import CHART_COLORS
from analysis.reports.visualizations import category_labels, format_value

# Visualization settings
sns.set_style("whitegrid")


def save_aggregate_bar_figure(aggregate: pd.Series, output_path, title: str,
                              xlabel: Optional[str] = None,
                              ylabel: Optional[str] = None,
                              value_format: str = ',.0f',
                              value_prefix: str = '',
                              color: str = CHART_COLORS[0]) -> Optional[Path]:
    """
    Save a grouped aggregate as a labelled bar chart PNG

    Args:
        aggregate: Series indexed by group key
        output_path: Destination .png
        title: Figure title
        xlabel: X-axis label (defaults to the index name)
        ylabel: Y-axis label (defaults to the series name)
        value_format: Format spec for bar labels
        value_prefix: Text placed before each bar label
        color: Bar color

    Returns:
        Path written, or None when the aggregate is empty
    """
    if len(aggregate) == 0:
        print(f'  ⚠️  Nothing to plot for "{title}" (empty aggregate)')
        return None

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    labels = category_labels(aggregate.index)
    heights = aggregate.fillna(0).values

    fig, ax = plt.subplots(figsize=(12, 6))
    bars = ax.bar(labels, heights, color=color, alpha=0.85, edgecolor='black', linewidth=0.5)

    ax.bar_label(bars, labels=[format_value(v, value_format, value_prefix) for v in aggregate.values],
                 padding=3, fontsize=9)
    ax.set_title(title, fontsize=14, fontweight='bold', pad=20)
    ax.set_xlabel(xlabel if xlabel is not None else (aggregate.index.name or ''), fontsize=12)
    ax.set_ylabel(ylabel if ylabel is not None else (aggregate.name or ''), fontsize=12)
    ax.tick_params(axis='x', labelrotation=45)
    for tick in ax.get_xticklabels():
        tick.set_horizontalalignment('right')
    ax.grid(axis='x', alpha=0)

    fig.tight_layout()
    fig.savefig(output_path, dpi=200, bbox_inches='tight')
    plt.close(fig)
    print(f'  ✓ Saved: {output_path}')

    return output_path
