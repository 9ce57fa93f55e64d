#!/usr/bin/env python3
"""
Aliens API — Service Management Tool

Single entry point for running and maintaining the service locally.
Usage: python manage.py <command> [options]
"""

import json
import logging
import os
import subprocess
import sys
import urllib.request
from datetime import datetime
from pathlib import Path
from typing import List


BACKEND_DIR = Path(__file__).resolve().parent / "backend"


# ═══════════════════════════════════════════════════════════
#  Logging Setup
# ═══════════════════════════════════════════════════════════

class ColorFormatter(logging.Formatter):
    """Console formatter with ANSI colors and level symbols."""

    COLORS = {
        "INFO": "\033[96m",        # Cyan
        "SUCCESS": "\033[92m",     # Green
        "WARNING": "\033[93m",     # Yellow
        "ERROR": "\033[91m",       # Red
        "DEBUG": "\033[94m",       # Blue
        "HEADER": "\033[95m",      # Magenta
        "BOLD": "\033[1m",
        "RESET": "\033[0m",
    }

    MARKERS = {
        "[SUCCESS]": ("✓", "SUCCESS"),
        "[WARNING]": ("⚠", "WARNING"),
        "[ERROR]": ("✗", "ERROR"),
        "[STEP]": ("▶", "INFO"),
    }

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors and sys.platform != "win32"

    def format(self, record: logging.LogRecord) -> str:
        msg = str(record.msg)
        symbol, color = "→", record.levelname

        for marker, (marker_symbol, marker_color) in self.MARKERS.items():
            if marker in msg:
                symbol, color = marker_symbol, marker_color
                msg = msg.replace(marker, "").lstrip()
                break

        if msg.startswith("\n==="):
            color = "HEADER"
        elif not msg.startswith((" ", "\n")):
            msg = f"{symbol} {msg}"

        if self.use_colors:
            msg = f"{self.COLORS.get(color, '')}{msg}{self.COLORS['RESET']}"

        record.msg = msg
        return super().format(record)


_log_dir = "logs"
os.makedirs(_log_dir, exist_ok=True)
_log_file = os.path.join(_log_dir, f"manage-{datetime.now():%Y%m%d}.log")

_file_handler = logging.FileHandler(_log_file, encoding="utf-8")
_file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))

_console_handler = logging.StreamHandler()
_console_handler.setFormatter(ColorFormatter())

logging.basicConfig(level=logging.INFO, handlers=[_file_handler, _console_handler])
logger = logging.getLogger("manage")


# ═══════════════════════════════════════════════════════════
#  Service Manager
# ═══════════════════════════════════════════════════════════

class ServiceManager:
    """Runs, migrates, seeds and smoke-tests the aliens service."""

    def __init__(self, host: str = "127.0.0.1", port: int = 8000):
        self.host = host
        self.port = port
        self.base_url = f"http://{host}:{port}"

    # ─── Helpers ──────────────────────────────────────────
    def _run(self, cmd: List[str], check: bool = True) -> subprocess.CompletedProcess:
        logger.info(f"[STEP] Running: {' '.join(cmd)}")
        try:
            result = subprocess.run(
                cmd, check=check, text=True, capture_output=True, cwd=BACKEND_DIR
            )
            for line in (result.stdout or "").strip().splitlines():
                if line.strip():
                    logger.info(f"  {line.strip()}")
            for line in (result.stderr or "").strip().splitlines():
                if line.strip():
                    logger.warning(f"  {line.strip()}")
            return result
        except subprocess.CalledProcessError as exc:
            logger.error(f"Command failed (exit {exc.returncode})")
            if exc.stderr:
                logger.error(f"  {exc.stderr.strip()}")
            raise

    def _get(self, path: str) -> tuple[int, str]:
        with urllib.request.urlopen(f"{self.base_url}{path}", timeout=10) as resp:
            return resp.status, resp.read().decode()

    # ─── Core Commands ────────────────────────────────────
    def serve(self, reload: bool = False) -> None:
        """Run the API with uvicorn in the foreground (Ctrl-C to stop)."""
        logger.info("\n=== Starting Aliens API ===")
        cmd = [
            sys.executable, "-m", "uvicorn", "app.main:app",
            "--host", self.host, "--port", str(self.port),
        ]
        if reload:
            cmd.append("--reload")
        logger.info(f"[STEP] {' '.join(cmd)}")
        self.urls()
        try:
            subprocess.run(cmd, cwd=BACKEND_DIR, check=True)
        except KeyboardInterrupt:
            logger.info("\n[SUCCESS] Server stopped")

    # ─── Database ─────────────────────────────────────────
    def init_db(self) -> None:
        """Run Alembic migrations."""
        logger.info("\n=== Database Initialisation ===")
        logger.info("[STEP] Running Alembic migrations…")
        self._run([sys.executable, "-m", "alembic", "upgrade", "head"])
        logger.info("[SUCCESS] Database migrations applied!")

    def seed(self) -> None:
        """Insert sample aliens."""
        logger.info("\n=== Seeding Database ===")
        self._run([sys.executable, "-m", "scripts.seed_aliens"])
        logger.info("[SUCCESS] Seed data inserted!")

    # ─── Smoke Test ───────────────────────────────────────
    def test(self) -> bool:
        """Quick smoke-test of a running instance."""
        logger.info("\n=== Smoke Test ===")
        ok = True

        try:
            logger.info("[STEP] Testing health endpoint…")
            _, body = self._get("/health")
            data = json.loads(body)
            logger.info(f"[SUCCESS] Backend: status={data.get('status')} env={data.get('env')}")
        except Exception as exc:
            logger.error(f"[ERROR] Health check failed: {exc}")
            ok = False

        try:
            logger.info("[STEP] Listing aliens…")
            _, body = self._get("/aliens")
            logger.info(f"[SUCCESS] /aliens returned {len(json.loads(body))} record(s)")
        except Exception as exc:
            logger.error(f"[ERROR] /aliens check failed: {exc}")
            ok = False

        return ok

    # ─── URLs ─────────────────────────────────────────────
    def urls(self) -> None:
        """Print access URLs."""
        logger.info("\n=== Access URLs ===")
        logger.info(f"  Aliens API:    {self.base_url}/aliens")
        logger.info(f"  Swagger Docs:  {self.base_url}/docs")
        logger.info(f"  Health Check:  {self.base_url}/health")


# ═══════════════════════════════════════════════════════════
#  CLI
# ═══════════════════════════════════════════════════════════

USAGE = """
Aliens API — Service Management
==================================================

Usage: python manage.py <command> [options]

Commands:
    serve           Run the API with uvicorn (--reload for autoreload)
    init-db         Run Alembic migrations
    seed            Insert sample aliens
    test            Smoke-test a running instance
    urls            Show access URLs

Options:
    --host=HOST     Bind/probe host (default 127.0.0.1)
    --port=PORT     Bind/probe port (default 8000)
    --reload        Autoreload on code changes ('serve' only)

Examples:
    python manage.py init-db
    python manage.py serve --reload
    python manage.py test --port=8080
"""


def _option(opts: List[str], name: str, default: str) -> str:
    for o in opts:
        if o.startswith(f"--{name}="):
            return o.split("=", 1)[1]
    return default


def main() -> None:
    if len(sys.argv) < 2 or sys.argv[1] in ("-h", "--help"):
        print(USAGE)
        sys.exit(0)

    command = sys.argv[1]
    opts = sys.argv[2:]

    mgr = ServiceManager(
        host=_option(opts, "host", "127.0.0.1"),
        port=int(_option(opts, "port", "8000")),
    )

    try:
        if command == "serve":
            mgr.serve(reload="--reload" in opts)
        elif command == "init-db":
            mgr.init_db()
        elif command == "seed":
            mgr.seed()
        elif command == "test":
            if not mgr.test():
                sys.exit(1)
        elif command == "urls":
            mgr.urls()
        else:
            logger.error(f"Unknown command: {command}")
            print(USAGE)
            sys.exit(1)
    except Exception as exc:
        logger.error(f"Operation failed: {exc}")
        sys.exit(1)


if __name__ == "__main__":
    main()
