# besttimes/config.py

from pathlib import Path

# ---------- Directory Configuration ----------
ROOT_DIR = Path.cwd()  # Admin logs are looked up relative to where the tool runs

# Input files
DEFAULT_LOG_FILE = ROOT_DIR / "GameLog.mlxadmin.txt"
LOG_ENCODING = "utf-8"

# ---------- Aggregation Configuration ----------
INITIAL_TRACK = "initial"  # Track name used until the first Loading line

# ---------- Report Configuration ----------
REPORT_FORMATS = ("text", "json")
DEFAULT_REPORT_FORMAT = "text"
JSON_INDENT = 2

# ---------- Logging Configuration ----------
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"

# ---------- Validation ----------
def validate_config(log_file=None):
    """Validate that the admin log is readable before processing starts."""
    log_file = Path(log_file) if log_file else DEFAULT_LOG_FILE

    issues = []

    if not log_file.exists():
        issues.append(f"Admin log not found: {log_file}")
    elif not log_file.is_file():
        issues.append(f"Admin log is not a regular file: {log_file}")

    return issues
