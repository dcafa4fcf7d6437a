"""
Dummy app — Configuration
All settings are read from environment variables with defaults matching the stock app.
"""
import os


def _positive_float(name: str, default: str) -> float:
    value = float(os.getenv(name, default))
    if value <= 0:
        raise ValueError(f"{name} must be greater than 0 (got {value})")
    return value


# ── Server ────────────────────────────────────────────────────────────────────
HOST                  = os.getenv("HOST", "0.0.0.0")
PORT                  = int(os.getenv("PORT", "3000"))
PUBLIC_HOSTNAME       = "localhost"  # shown in the startup banner

# ── Time announcer ────────────────────────────────────────────────────────────
TIME_LOG_INTERVAL_SEC = _positive_float("TIME_LOG_INTERVAL_SEC", "1")  # seconds

# ── Logging ───────────────────────────────────────────────────────────────────
LOG_LEVEL             = os.getenv("LOG_LEVEL", "warning").lower()  # uvicorn loggers only

# ── Responses ─────────────────────────────────────────────────────────────────
ROOT_MESSAGE          = "Dummy app running. Check console for time logs."
