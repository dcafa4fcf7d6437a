"""
Dummy App
=========
A single-route web server plus a console clock.

  GET /   returns a fixed plaintext line
  stdout  "Current time: <locale time>" once per TIME_LOG_INTERVAL_SEC

Both live on one asyncio event loop: uvicorn serves the FastAPI app and the
announcer runs as a background task owned by the app lifespan.
"""

import time

# Tick deadlines count from here, before the framework imports
STARTED_AT = time.monotonic()

import asyncio  # noqa: E402
import socket  # noqa: E402
from contextlib import asynccontextmanager  # noqa: E402

import uvicorn  # noqa: E402
from fastapi import FastAPI  # noqa: E402

from announcer import announce_loop  # noqa: E402
from config import HOST, LOG_LEVEL, PORT, PUBLIC_HOSTNAME, TIME_LOG_INTERVAL_SEC  # noqa: E402
from routers import root  # noqa: E402


# ── Lifespan ──────────────────────────────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: launch the time announcer (run() sets started_at; None means "now")
    started_at = getattr(app.state, "started_at", None)
    task = asyncio.create_task(announce_loop(TIME_LOG_INTERVAL_SEC, started_at))
    app.state.announcer = task
    yield
    # Shutdown: cancel background task cleanly
    task.cancel()
    try:
        await task
    except asyncio.CancelledError:
        pass


# ── App ───────────────────────────────────────────────────────────────────────

app = FastAPI(
    lifespan=lifespan,
    title="Dummy App",
    description="Serves one static route and logs the current time to the console.",
    version="1.0.0",
)

app.include_router(root.router)


# ── Entry point ───────────────────────────────────────────────────────────────

def bind_socket(host: str = HOST, port: int = PORT) -> socket.socket:
    """Bind and listen. Raises OSError if the port is taken; there is no retry."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
        sock.listen()
    except OSError:
        sock.close()
        raise
    return sock


def startup_banner(port: int = PORT, hostname: str = PUBLIC_HOSTNAME) -> list[str]:
    return [
        f"Dummy app listening at http://{hostname}:{port}",
        "Time will be logged every 5 seconds. Check console for updates.",
    ]


def run() -> None:
    sock = bind_socket()
    for line in startup_banner(sock.getsockname()[1]):
        print(line, flush=True)

    app.state.started_at = STARTED_AT
    server = uvicorn.Server(uvicorn.Config(app, log_level=LOG_LEVEL, access_log=False))
    server.run(sockets=[sock])


if __name__ == "__main__":
    run()
