"""
Railway startup script.

Handles:
    1. Upload directory check
    2. Database schema creation
    3. Starts FastAPI backend (uvicorn) in the foreground

Usage:
    python railway_start.py            # schema + API
    python railway_start.py --no-init  # API only (schema already exists)
    python railway_start.py --reload   # dev mode with auto-reload
"""

import argparse
import asyncio
import os
import sys

os.chdir(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ".")


def check_upload_dir():
    """Make sure uploaded documents have somewhere to go."""
    from backend.storage import upload_dir
    path = upload_dir()
    print(f"  Uploads directory: {path}")


async def run_db_init():
    """Create tables in DATABASE_URL (or the local SQLite fallback)."""
    from backend.database import DATABASE_URL, init_db

    backend_name = DATABASE_URL.split(":", 1)[0]
    print(f"  Creating schema ({backend_name})...")
    await init_db()
    print("  Database schema ready")


def main():
    from backend import config

    parser = argparse.ArgumentParser(description="Investify API server")
    parser.add_argument("--no-init", action="store_true", help="Skip schema creation")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload for development")
    parser.add_argument("--host", default=config.HOST)
    parser.add_argument("--port", type=int, default=config.PORT)
    args = parser.parse_args()

    print("=" * 60)
    print("  Investify API -- Railway Startup")
    print("=" * 60)

    print("\n[1/3] Checking uploads directory...")
    check_upload_dir()

    if not args.no_init:
        print("\n[2/3] Database initialization...")
        asyncio.run(run_db_init())
    else:
        print("\n[2/3] Skipping schema creation (--no-init)")

    print(f"\n[3/3] Starting FastAPI on {args.host}:{args.port}...")
    cmd = [sys.executable, "-m", "uvicorn", "backend.app:app",
           "--host", args.host, "--port", str(args.port)]
    if args.reload:
        cmd.append("--reload")
    os.execvp(sys.executable, cmd)


if __name__ == "__main__":
    main()
