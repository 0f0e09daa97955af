"""
Development server launcher.

Loads .env, initializes the database if asked, and runs FastAPI with
uvicorn in reload mode.

Usage:
    python scripts/run_dev.py [--init-db] [--port 8000]
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

import uvicorn

from app.core.config import settings

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Run the Rule of Life API with auto-reload.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--init-db", action="store_true", help="create tables and seed practices first")
    args = parser.parse_args()

    if args.init_db:
        from app.db.init_db import init_db

        init_db()

    print("=" * 60)
    print(f"{settings.PROJECT_NAME} Development Server ({settings.TIME_ZONE})")
    print("=" * 60)
    print()
    print(f"API: http://{args.host}:{args.port}")
    print(f"Docs: http://{args.host}:{args.port}/docs")
    print()
    print("Press Ctrl+C to stop")
    print("=" * 60)

    uvicorn.run("app.main:app", host=args.host, port=args.port, reload=True, log_level=settings.LOG_LEVEL.lower())
