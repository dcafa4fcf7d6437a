"""
Dummy app — Time announcer
Prints the current wall-clock time to stdout once per interval.
"""
import asyncio
import time
from datetime import datetime

from config import TIME_LOG_INTERVAL_SEC


def format_time(now: datetime | None = None) -> str:
    """Locale time-of-day, no date (HH:MM:SS under the C locale)."""
    return (now or datetime.now()).strftime("%X")


def announce(now: datetime | None = None) -> str:
    line = f"Current time: {format_time(now)}"
    print(line, flush=True)
    return line


async def announce_loop(
    interval_sec: float = TIME_LOG_INTERVAL_SEC,
    started_at: float | None = None,
    clock=time.monotonic,
) -> None:
    """
    Announce the time every interval_sec. Runs as a background task until cancelled.

    Tick n is due at started_at + n * interval_sec on `clock`, so time spent before
    the task starts counts toward the first tick. Missed deadlines fire immediately.
    """
    if started_at is None:
        started_at = clock()
    tick = 1
    while True:
        await asyncio.sleep(max(0.0, started_at + tick * interval_sec - clock()))
        tick += 1
        try:
            announce()
        except Exception as exc:
            print(f"[announcer] Error during tick: {exc}", flush=True)
