from pathlib import Path

# Project Root
PROJECT_ROOT = Path(__file__).resolve().parent

# Data Directory
DATA_DIR = PROJECT_ROOT / "data"

RAW_DIR = DATA_DIR / "raw"
PROCESSED_DIR = DATA_DIR / "processed" / "nypd"

# Reports
REPORTS_DIR = PROJECT_ROOT / "reports"
FIGURES_DIR = REPORTS_DIR / "figures"

# Source: NYPD Shooting Incident Data (Historic), NYC Open Data
SHOOTINGS_URL = (
    "https://data.cityofnewyork.us/api/views/833y-2x4s/rows.csv?accessType=DOWNLOAD"
)
REQUEST_TIMEOUT_S = 120

# Placeholder values meaning "unknown" in the perpetrator / location fields.
# "1020", "224" and "940" are mistyped codes, matched as strings.
SENTINEL_TOKENS = frozenset({"(null)", "UNKNOWN", "U", "1020", "224", "940", "NONE"})

PERP_COLUMNS = ["PERP_AGE_GROUP", "PERP_SEX", "PERP_RACE"]
LOCATION_DESC_COLUMN = "LOCATION_DESC"
SENTINEL_COLUMNS = PERP_COLUMNS + [LOCATION_DESC_COLUMN]

# Source column -> tidy column
COLUMN_MAP = {
    "OCCUR_DATE": "date",
    "OCCUR_TIME": "time",
    "BORO": "boro",
    "STATISTICAL_MURDER_FLAG": "murder",
}

DATE_FORMAT = "%m/%d/%Y"

MONTH_LABELS = [
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
]

GROUP_KEYS = ["boro", "hour", "month"]

# Fraction of points used in each local fit (R loess default span)
LOESS_SPAN = 0.75
