#!/usr/bin/env python3
"""
Diagnosis-Related Malpractice Payments Report

Builds the NPDB analysis table, aggregates it by pay type, payer relationship
and origin year, and writes an HTML report that interleaves short commentary
with bar charts.

Usage:
    python analysis/reports/diagnosis_report.py
    python analysis/reports/diagnosis_report.py --data data/bronze/npdb/NPDB_PUF.csv --static
"""

import argparse
import html
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import numpy as np
import pandas as pd

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent.parent))
from config.paths import DEFAULT_NPDB_FILE, REPORTS, VISUALIZATIONS, REPORT_FILENAME
from config.npdb import (
    ORIGIN_YEAR, PAYMENT, TOTAL_PAYMENT, PAY_TYPE, PAYER_RELATIONSHIP,
    DIAGNOSIS_CODE, MIN_ORIGIN_YEAR, PAY_TYPE_LABELS, PAYER_RELATIONSHIP_LABELS,
    UNKNOWN_PAY_TYPES, CHART_COLORS
)
from data_engineering.clean.column_names import normalize_column_name
from data_engineering.datasets.build_diagnosis_dataset import (
    BuildSummary, build_diagnosis_dataset
)
from analysis.aggregates import count_by, mean_by, summarize_payments
from analysis.reports.visualizations import create_aggregate_bar_chart, category_labels
from analysis.reports.static_figures import save_aggregate_bar_figure

PAY_TYPE_COL = normalize_column_name(PAY_TYPE)
PAYER_COL = normalize_column_name(PAYER_RELATIONSHIP)
YEAR_COL = normalize_column_name(ORIGIN_YEAR)
PAYMENT_COL = normalize_column_name(PAYMENT)
TOTAL_PAYMENT_COL = normalize_column_name(TOTAL_PAYMENT)


@dataclass
class ReportSection:
    """One heading, its commentary, and its charts"""
    title: str
    paragraphs: List[str] = field(default_factory=list)
    charts: List[tuple] = field(default_factory=list)  # (slug, aggregate, chart options)
    table_html: Optional[str] = None


# ============================================================================
# COMMENTARY
# ============================================================================

def report_groups(series: pd.Series, labels, exclude=()) -> list:
    """Known labels first, then any other observed values, then missing"""
    groups = [label for label in labels if label not in exclude]
    observed = series.dropna().unique()
    groups += sorted((v for v in observed if v not in groups), key=str)
    if series.isna().any():
        groups.append(np.nan)
    return groups


def describe_largest_group(counts: pd.Series, noun: str) -> str:
    """Sentence naming the group with the most reports"""
    total = int(counts.sum())
    if total == 0:
        return f'No {noun} data remain after filtering.'

    top_key = counts.idxmax()
    top = int(counts.max())
    label = category_labels(pd.Index([top_key]))[0]
    return (f'{label} accounts for the most reports by {noun}: '
            f'{top:,} of {total:,} ({top / total:.1%}).')


def describe_highest_mean(means: pd.Series, noun: str) -> str:
    """Sentence naming the group with the highest average payment"""
    observed = means.dropna()
    if observed.empty:
        return f'No payments were reported for any {noun}, so no averages are available.'

    label = category_labels(pd.Index([observed.idxmax()]))[0]
    sentence = f'{label} carries the highest average payment by {noun} at ${observed.max():,.0f}.'

    missing = means[means.isna()]
    if len(missing) > 0:
        names = ', '.join(category_labels(missing.index))
        sentence += f' No payments were reported for: {names}.'
    return sentence


# ============================================================================
# SECTIONS
# ============================================================================

def build_sections(df: pd.DataFrame, summary: BuildSummary) -> List[ReportSection]:
    """Aggregate the analysis table and write the commentary for each section"""
    sections = []

    # Data
    data = ReportSection('Data')
    data.paragraphs.append(
        f'The source file lists {summary.loaded_rows:,} reports. '
        f'{summary.filtered_rows:,} are diagnosis-related (allegation nature '
        f'{summary.allegation_code}) and originated in {summary.min_year} or later.'
    )
    data.paragraphs.append(
        f'{summary.unknown_pay_type_rows:,} of those have an Unknown pay type and are '
        f'left out of every figure below. In the NPDB coding scheme Unknown mixes '
        f'reports with no payment and older "Before" reports filed electronically '
        f'before 1995, so it cannot be read as either. '
        f'{summary.final_rows:,} reports remain.'
    )
    unparsed = sum(summary.unparsed_payments.values())
    if unparsed:
        data.paragraphs.append(
            f'{unparsed:,} payment values could not be read as amounts and are treated as missing.'
        )
    sections.append(data)

    # Payment summary
    payments = ReportSection('Payments')
    stats = summarize_payments(df, [PAYMENT_COL, TOTAL_PAYMENT_COL])
    if stats.loc[PAYMENT_COL, 'reported'] > 0:
        payments.paragraphs.append(
            f'{int(stats.loc[PAYMENT_COL, "reported"]):,} reports include a payment amount. '
            f'The median payment is ${stats.loc[PAYMENT_COL, "median"]:,.0f} against a mean of '
            f'${stats.loc[PAYMENT_COL, "mean"]:,.0f}; averages below are pulled up by a few '
            f'large awards.'
        )
    else:
        payments.paragraphs.append('No report in this subset includes a payment amount.')
    payments.table_html = stats.to_html(
        float_format=lambda v: f'{v:,.2f}', na_rep='n/a', classes='summary', border=0
    )
    sections.append(payments)

    # Pay type
    pay_groups = report_groups(df[PAY_TYPE_COL], PAY_TYPE_LABELS.values(), UNKNOWN_PAY_TYPES)
    pay_counts = count_by(df, PAY_TYPE_COL, pay_groups)
    pay_means = mean_by(df, PAY_TYPE_COL, PAYMENT_COL, pay_groups)
    pay = ReportSection('Pay Type')
    pay.paragraphs.append(describe_largest_group(pay_counts, 'pay type'))
    pay.charts.append(('reports_by_pay_type', pay_counts, dict(
        title='Diagnosis-Related Reports by Pay Type',
        xaxis_title='Pay Type', yaxis_title='Reports', color=CHART_COLORS[0])))
    pay.paragraphs.append(describe_highest_mean(pay_means, 'pay type'))
    pay.charts.append(('mean_payment_by_pay_type', pay_means, dict(
        title='Mean Payment by Pay Type',
        xaxis_title='Pay Type', yaxis_title='Mean Payment (USD)',
        value_prefix='$', color=CHART_COLORS[1])))
    sections.append(pay)

    # Payer relationship
    payer_groups = report_groups(df[PAYER_COL], PAYER_RELATIONSHIP_LABELS.values())
    payer_counts = count_by(df, PAYER_COL, payer_groups)
    payer_means = mean_by(df, PAYER_COL, PAYMENT_COL, payer_groups)
    payer = ReportSection('Payer Relationship')
    payer.paragraphs.append(describe_largest_group(payer_counts, 'payer'))
    payer.charts.append(('reports_by_payer', payer_counts, dict(
        title='Diagnosis-Related Reports by Payer Relationship',
        xaxis_title='Payer', yaxis_title='Reports', color=CHART_COLORS[2])))
    payer.paragraphs.append(describe_highest_mean(payer_means, 'payer'))
    payer.charts.append(('mean_payment_by_payer', payer_means, dict(
        title='Mean Payment by Payer Relationship',
        xaxis_title='Payer', yaxis_title='Mean Payment (USD)',
        value_prefix='$', color=CHART_COLORS[3])))
    sections.append(payer)

    # Origin year
    year_counts = count_by(df, YEAR_COL)
    years = ReportSection('Origin Year')
    if len(year_counts) > 0:
        years.paragraphs.append(
            f'Reports span origin years {year_counts.index.min()} to {year_counts.index.max()}. '
            f'Recent years are still filling in as claims resolve, so later bars run low.'
        )
    years.charts.append(('reports_by_origin_year', year_counts, dict(
        title='Diagnosis-Related Reports by Origin Year',
        xaxis_title='Origin Year', yaxis_title='Reports', color=CHART_COLORS[4])))
    sections.append(years)

    return sections


# ============================================================================
# RENDERING
# ============================================================================

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>
    body {{ font-family: system-ui, -apple-system, Segoe UI, Roboto, Helvetica, Arial, sans-serif;
           max-width: 1100px; margin: 0 auto; padding: 16px 20px; color: #2c3e50; }}
    h1 {{ font-size: 2rem; font-weight: 700; }}
    h2 {{ border-bottom: 2px solid #3498db; padding-bottom: 4px; margin-top: 2rem; }}
    table.summary {{ border-collapse: collapse; }}
    table.summary th, table.summary td {{ padding: 4px 12px; text-align: right; }}
    .source {{ color: #6b7280; font-size: 0.9rem; }}
</style>
</head>
<body>
<h1>{title}</h1>
<p class="source">Source: {source}</p>
{body}
</body>
</html>
"""


def render_section(section: ReportSection, figures: dict, include_plotlyjs: list) -> str:
    """HTML for one section; plotly.js is embedded with the first chart only"""
    parts = [f'<h2>{html.escape(section.title)}</h2>']

    paragraphs = list(section.paragraphs)
    charts = list(section.charts)
    # Each chart follows the paragraph that introduces it
    while paragraphs or charts:
        if paragraphs:
            parts.append(f'<p>{html.escape(paragraphs.pop(0))}</p>')
        if charts:
            slug = charts.pop(0)[0]
            parts.append(figures[slug].to_html(
                full_html=False,
                include_plotlyjs=include_plotlyjs[0],
                div_id=slug
            ))
            include_plotlyjs[0] = False

    if section.table_html:
        parts.append(section.table_html)
    return '\n'.join(parts)


def build_report(df: pd.DataFrame, summary: BuildSummary):
    """
    Assemble the HTML report

    Returns:
        (html text, {slug: (aggregate, chart options)}, {slug: plotly figure})
    """
    sections = build_sections(df, summary)

    aggregates = {}
    figures = {}
    for section in sections:
        for slug, aggregate, options in section.charts:
            aggregates[slug] = (aggregate, options)
            figures[slug] = create_aggregate_bar_chart(aggregate, **options)

    include_plotlyjs = [True]
    body = '\n'.join(render_section(s, figures, include_plotlyjs) for s in sections)

    title = f'Diagnosis-Related Malpractice Payments, {summary.min_year} Onward'
    page = PAGE_TEMPLATE.format(
        title=html.escape(title),
        source=html.escape(f'National Practitioner Data Bank Public Use File ({Path(summary.source_file).name})'),
        body=body
    )
    return page, aggregates, figures


def save_static_figures(aggregates: dict, static_dir) -> List[Path]:
    """Write each chart as PNG; empty aggregates are skipped"""
    written = []
    for slug, (aggregate, options) in aggregates.items():
        path = save_aggregate_bar_figure(
            aggregate,
            Path(static_dir) / f'{slug}.png',
            title=options['title'],
            xlabel=options.get('xaxis_title'),
            ylabel=options.get('yaxis_title'),
            value_prefix=options.get('value_prefix', ''),
            color=options.get('color', CHART_COLORS[0])
        )
        if path is not None:
            written.append(path)
    return written


def generate_report(data_file=DEFAULT_NPDB_FILE,
                    output_dir=REPORTS,
                    min_year: int = MIN_ORIGIN_YEAR,
                    allegation_code: str = DIAGNOSIS_CODE,
                    static_dir=None,
                    nrows: Optional[int] = None,
                    verbose: bool = True) -> Path:
    """
    Run the full pipeline and write the HTML report

    Args:
        data_file: NPDB Public Use File
        output_dir: Directory for the HTML report
        min_year: Minimum origin year
        allegation_code: Allegation nature code to analyse
        static_dir: If given, also write PNG charts here
        nrows: Read only the first n rows
        verbose: Print progress

    Returns:
        Path of the written report
    """
    df, summary = build_diagnosis_dataset(
        data_file,
        allegation_code=allegation_code,
        min_year=min_year,
        nrows=nrows,
        verbose=verbose
    )

    if verbose:
        print(f'\n{"="*80}')
        print('RENDERING REPORT')
        print(f'{"="*80}')

    page, aggregates, _ = build_report(df, summary)

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    report_path = output_dir / REPORT_FILENAME
    report_path.write_text(page, encoding='utf-8')
    if verbose:
        print(f'  ✓ Saved: {report_path}')

    if static_dir is not None:
        save_static_figures(aggregates, static_dir)

    return report_path


def main():
    parser = argparse.ArgumentParser(description='Generate the diagnosis-related malpractice report')
    parser.add_argument('--data', type=Path, default=DEFAULT_NPDB_FILE,
                        help='NPDB Public Use File (CSV)')
    parser.add_argument('--output-dir', type=Path, default=REPORTS,
                        help='Directory for the HTML report')
    parser.add_argument('--min-year', type=int, default=MIN_ORIGIN_YEAR,
                        help='Minimum origin year (inclusive)')
    parser.add_argument('--static', action='store_true',
                        help=f'Also save PNG charts to {VISUALIZATIONS}')

    args = parser.parse_args()

    try:
        report_path = generate_report(
            args.data,
            output_dir=args.output_dir,
            min_year=args.min_year,
            static_dir=VISUALIZATIONS if args.static else None
        )
    except (FileNotFoundError, ValueError, pd.errors.ParserError) as e:
        print(f'\n✗ Report failed: {e}')
        sys.exit(1)

    print(f'\n✅ Report complete: {report_path}')


if __name__ == '__main__':
    main()
