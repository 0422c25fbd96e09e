"""Application constants and configuration."""

from pathlib import Path

# Application constants
APP_TITLE = "PPA - Personal Project Assistant"
APP_ICON = "📊"
STORAGE_KEY = "ppa_team_data"
EXPORT_FILENAME_PREFIX = "PPA_Meeting_Report"

# Config file paths for local storage
CONFIG_DIR = Path.home() / ".ppa_dashboard"

# ============================================================================
# STORAGE SETTINGS
# ============================================================================

# Backend used by the record store: 'duckdb', 'file' or 'memory'
DEFAULT_STORAGE_BACKEND = "duckdb"

# Database file path for the DuckDB backend
DATABASE_PATH = CONFIG_DIR / "ppa.duckdb"
STATE_TABLE = "app_state"

# ============================================================================
# IMPORT / EXPORT
# ============================================================================

# Column order shared by the tab-separated import and the CSV export
EXPORT_HEADERS = [
    "Team Member",
    "Title",
    "Date",
    "Priority/Goal",
    "Initiative",
    "Update Description",
    "Health",
    "Status",
    "Due Date",
    "Meeting Feedback",
]

IMPORT_FORMAT_GUIDE = "\t".join([
    "Team Member",
    "Title",
    "Date",
    "Project Priority/Goal",
    "Key Initiatives",
    "Update Description",
    "Healthy (-1, 1)",
    "Status",
    "Due Date",
])

UPLOAD_ENCODINGS = ["utf-8-sig", "cp1252", "latin-1"]

# Defaults filled in at the import boundary
DEFAULT_TEAM_MEMBER = "Unknown"
DEFAULT_PRIORITY_GOAL = "Other"
DEFAULT_INITIATIVE = "Unnamed Project"
DEFAULT_STATUS = "0%"

# ============================================================================
# HEALTH
# ============================================================================

HEALTH_AT_RISK = -1
HEALTH_CAUTION = 0
HEALTH_HEALTHY = 1
HEALTH_VALUES = (HEALTH_AT_RISK, HEALTH_CAUTION, HEALTH_HEALTHY)

# Labels shown on cards and charts
HEALTH_LABELS = {
    HEALTH_HEALTHY: "Healthy",
    HEALTH_CAUTION: "Potential Issue",
    HEALTH_AT_RISK: "Risk/Behind",
}

# Labels used in the assistant data summary
HEALTH_SUMMARY_LABELS = {
    HEALTH_HEALTHY: "Healthy",
    HEALTH_CAUTION: "Warning",
    HEALTH_AT_RISK: "Risk",
}

HEALTH_COLORS = {
    HEALTH_HEALTHY: "#10b981",  # Green
    HEALTH_CAUTION: "#f59e0b",  # Amber
    HEALTH_AT_RISK: "#ef4444",  # Red
}

# Chart order: healthy first, risk last
HEALTH_CHART_ORDER = (HEALTH_HEALTHY, HEALTH_CAUTION, HEALTH_AT_RISK)

# ============================================================================
# ASSISTANT (Gemini)
# ============================================================================

DEFAULT_MODEL = "gemini-3-flash-preview"
GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta"
API_KEY_ENV_VARS = ("API_KEY", "GEMINI_API_KEY")
SUGGESTION_COUNT = 5

ASSISTANT_APOLOGY = (
    "I'm having trouble connecting to my brain right now. "
    "Please check the system status."
)
MISSING_KEY_MESSAGE = "API Key not found in environment variables."
UPSTREAM_ERROR_MESSAGE = "I encountered an error processing that request."

# ============================================================================
# PLANNER
# ============================================================================

PROJECT_STATUSES = ["planning", "active", "on-hold", "completed"]
PROJECT_STATUS_LABELS = {
    "planning": "Planning",
    "active": "Active",
    "on-hold": "On Hold",
    "completed": "Completed",
}
