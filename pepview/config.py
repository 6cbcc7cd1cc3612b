import os

def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")

def _env_number(name, default, cast):
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return cast(value)
    except ValueError:
        print(f"Warning: ignoring ${name}={value!r}, using {default}")
        return default

# Input table
PEPTIDE_COL_INDEX = _env_number("PEPVIEW_PEPTIDE_COL", 25, int)
SKIP_MALFORMED_ROWS = _env_flag("PEPVIEW_SKIP_MALFORMED")
CSV_ENCODING = "latin-1"

# makeblastdb
DB_NAME = "HCMV"
DB_TITLE = "HCMV genome"
DB_VERSION = 4
REFERENCE_FASTA = "HCMVProteins.fasta"

# mview
MIN_IDENTITY = 100

# seconds before an external tool is killed
TOOL_TIMEOUT = _env_number("PEPVIEW_TOOL_TIMEOUT", 3600.0, float)

LOG_DIR_NAME = "log"

# Genome Workbench install locations, checked in this order
VIEWER_PATHS = {
    "win32": [r"C:\Program Files\Genome Workbench x64\bin\gbench.exe"],
    "darwin": ["/Applications/Genome Workbench.app/Contents/MacOS/Genome Workbench"],
}
