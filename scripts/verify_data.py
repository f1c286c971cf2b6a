#!/usr/bin/env python3
"""
Data Verification Script

Checks that the NPDB Public Use File is present and carries the columns
the report needs before running the pipeline.

Usage:
    python scripts/verify_data.py
    python scripts/verify_data.py --data path/to/NPDB_PUF.csv
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))

import pandas as pd
from config.paths import DEFAULT_NPDB_FILE, BRONZE_NPDB, ensure_directories
from config.npdb import REQUIRED_COLUMNS, TEXT_COLUMNS


def check_file_exists(file_path, description):
    """Check if a file exists and print status"""
    file_path = Path(file_path)
    if file_path.exists():
        size_mb = file_path.stat().st_size / (1024 * 1024)
        print(f'✓ {description}: {size_mb:.1f} MB')
        return True
    else:
        print(f'✗ {description}: NOT FOUND')
        print(f'  Expected: {file_path}')
        return False


def verify_npdb_data(npdb_file):
    """Verify the NPDB header and the first rows parse"""
    try:
        df = pd.read_csv(npdb_file, nrows=100, dtype=TEXT_COLUMNS)
    except (OSError, ValueError) as e:
        print(f'  ✗ Error reading file: {e}')
        return False

    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        print(f'  ✗ Missing columns: {missing}')
        return False

    print('  ✓ Required columns present')
    return True


def verify_data(npdb_file=DEFAULT_NPDB_FILE):
    """
    Run all input checks

    Returns:
        True if the pipeline can run
    """
    print('NPDB Data (Bronze Layer):')
    if not check_file_exists(npdb_file, 'NPDB Public Use File'):
        print(f'  ℹ️  Download the Public Use File from the NPDB and save it under {BRONZE_NPDB}')
        return False
    return verify_npdb_data(npdb_file)


def main():
    """Main verification function"""
    parser = argparse.ArgumentParser(description='Verify the NPDB input file')
    parser.add_argument('--data', type=Path, default=DEFAULT_NPDB_FILE,
                        help='NPDB Public Use File (CSV)')
    args = parser.parse_args()

    print('=' * 80)
    print('DATA VERIFICATION')
    print('=' * 80)

    # Check directory structure
    print('\n1. Checking directory structure...')
    ensure_directories()
    print('  ✓ Directory structure initialized')

    print('\n2. Checking required data files...')
    print()

    all_ok = verify_data(args.data)

    print()
    print('=' * 80)

    if all_ok:
        print('✓ ALL CHECKS PASSED')
        print()
        print('Next steps:')
        print('  1. Run pipeline: python scripts/run_pipeline.py')
        return 0
    else:
        print('✗ VERIFICATION FAILED')
        print()
        print('Please fix the issues above before running the pipeline.')
        return 1


if __name__ == '__main__':
    sys.exit(main())
