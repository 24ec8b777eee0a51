import json
import logging
import os
import sys
from datetime import datetime, timezone

# [Requirement] Logs go to stdout as one JSON object per line,
# so the container runtime can collect them as-is.
logger = logging.getLogger("profile_view_counter")
logger.setLevel(getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO))
if not logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
logger.propagate = False


def _emit(level, entry):
    entry = {"ts": datetime.now(timezone.utc).isoformat(), "level": level, **entry}
    logger.log(getattr(logging, level), json.dumps(entry, default=str))


def log_request(request_id, method, path, status, latency, **extras):
    """
    Emits a structured JSON log line for one HTTP request.
    Badge requests add key, fill_mode and views through extras.
    """
    log_entry = {
        "request_id": request_id,
        "method": method,
        "path": path,
        "status": status,
        "latency_ms": round(latency * 1000, 2),  # seconds -> ms
    }
    log_entry.update(extras)
    _emit("ERROR" if status >= 500 else "INFO", log_entry)


def log_event(event, level="INFO", **extras):
    """Startup, shutdown and counter failures."""
    _emit(level, {"event": event, **extras})
