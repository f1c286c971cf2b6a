#!/usr/bin/env python3
"""
Master Pipeline Orchestration Script

Runs the complete report pipeline:
1. Verify the NPDB input file
2. Build the diagnosis-related analysis table
3. Aggregate and render the HTML report (plus optional PNG charts)

Usage:
    # Full pipeline
    python scripts/run_pipeline.py

    # Different input or year bound
    python scripts/run_pipeline.py --data path/to/NPDB_PUF.csv --min-year 2012

    # Also save static PNG charts
    python scripts/run_pipeline.py --static
"""

import sys
import argparse
from pathlib import Path
from datetime import datetime

import pandas as pd

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.append(str(PROJECT_ROOT))

from config.paths import DEFAULT_NPDB_FILE, REPORTS, VISUALIZATIONS
from config.npdb import MIN_ORIGIN_YEAR
from data_engineering.datasets.build_diagnosis_dataset import positive_int
from analysis.reports.diagnosis_report import generate_report
from scripts.verify_data import verify_data


def print_header(text):
    """Print a formatted header"""
    print('\n' + '=' * 80)
    print(text.center(80))
    print('=' * 80 + '\n')


def main(argv=None):
    """Main pipeline orchestration"""
    parser = argparse.ArgumentParser(
        description='Run the NPDB diagnosis-related malpractice report pipeline',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Full pipeline
  python scripts/run_pipeline.py

  # Sample mode (for testing)
  python scripts/run_pipeline.py --sample 10000

  # Skip verification
  python scripts/run_pipeline.py --skip-verify
        """
    )

    parser.add_argument('--data', type=Path, default=DEFAULT_NPDB_FILE,
                        help='NPDB Public Use File (CSV)')
    parser.add_argument('--output-dir', type=Path, default=REPORTS,
                        help='Directory for the HTML report')
    parser.add_argument('--min-year', type=int, default=MIN_ORIGIN_YEAR,
                        help='Minimum origin year (inclusive)')
    parser.add_argument('--sample', type=positive_int,
                        help='Use only the first N rows (for testing)')
    parser.add_argument('--static', action='store_true',
                        help='Also save PNG charts')
    parser.add_argument('--static-dir', type=Path, default=VISUALIZATIONS,
                        help='Directory for PNG charts')
    parser.add_argument('--skip-verify', action='store_true',
                        help='Skip data verification step')

    args = parser.parse_args(argv)

    # Print banner
    print_header('NPDB DIAGNOSIS-RELATED MALPRACTICE REPORT')
    print(f'Started: {datetime.now().strftime("%Y-%m-%d %H:%M:%S")}')

    if args.sample is not None:
        print(f'Mode: SAMPLE ({args.sample:,} records)')
    else:
        print('Mode: FULL DATASET')

    print()

    # Ensure output directories exist
    print('Ensuring directory structure...')
    args.output_dir.mkdir(parents=True, exist_ok=True)
    if args.static:
        args.static_dir.mkdir(parents=True, exist_ok=True)
    print('✓ Directory structure ready\n')

    start_time = datetime.now()

    # Step 0: Verify data (optional)
    if not args.skip_verify:
        print_header('STEP 0: DATA VERIFICATION')
        if not verify_data(args.data):
            print('\n✗ Data verification failed. Pipeline aborted.')
            return 1

    # Steps 1-7: build, aggregate, render
    try:
        report_path = generate_report(
            args.data,
            output_dir=args.output_dir,
            min_year=args.min_year,
            static_dir=args.static_dir if args.static else None,
            nrows=args.sample
        )
    except (FileNotFoundError, ValueError, pd.errors.ParserError) as e:
        print(f'\n✗ Pipeline failed: {e}')
        return 1

    # Summary
    end_time = datetime.now()

    print_header('PIPELINE SUMMARY')
    print(f'Started:  {start_time.strftime("%Y-%m-%d %H:%M:%S")}')
    print(f'Finished: {end_time.strftime("%Y-%m-%d %H:%M:%S")}')
    print(f'Duration: {end_time - start_time}')
    print()
    print('✓ PIPELINE COMPLETED SUCCESSFULLY')
    print(f'  Report: {report_path}')
    print()
    return 0


if __name__ == '__main__':
    sys.exit(main())
