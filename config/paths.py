"""
Project Path Configuration

Centralized path definitions for data and report outputs
Raw inputs live in the Bronze layer; cleaned tables and aggregates stay in memory
"""

from pathlib import Path

# Project root
PROJECT_ROOT = Path(__file__).parent.parent

# ==============================================================================
# DATA LAYERS
# ==============================================================================

DATA_ROOT = PROJECT_ROOT / "data"

# Bronze Layer: Raw, immutable data (as downloaded from the NPDB)
BRONZE = DATA_ROOT / "bronze"
BRONZE_NPDB = BRONZE / "npdb"

# ==============================================================================
# DEFAULT FILES
# ==============================================================================

DEFAULT_NPDB_FILE = BRONZE_NPDB / "NPDB_PUF.csv"

# ==============================================================================
# OUTPUTS
# ==============================================================================

OUTPUTS_ROOT = PROJECT_ROOT / "outputs"
VISUALIZATIONS = OUTPUTS_ROOT / "visualizations"
REPORTS = OUTPUTS_ROOT / "reports"

REPORT_FILENAME = "diagnosis_malpractice_report.html"

# ==============================================================================
# DIRECTORY INITIALIZATION
# ==============================================================================

def ensure_directories():
    """Create data and output directories if they don't exist"""
    data_dirs = [BRONZE, BRONZE_NPDB]
    output_dirs = [OUTPUTS_ROOT, VISUALIZATIONS, REPORTS]

    for directory in data_dirs + output_dirs:
        directory.mkdir(parents=True, exist_ok=True)
