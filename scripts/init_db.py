"""
Database initialization script.

Creates the sleep_intervals, baby_profile and app_settings tables in the
database configured by DATABASE_URL.

Usage:
    python scripts/init_db.py
"""

import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy.exc import SQLAlchemyError

from snoozy.core.config import settings
from snoozy.db.init_db import init_db

if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL)
    print("=" * 50)
    print("Snoozy Database Initialization")
    print("=" * 50)

    try:
        init_db()
    except SQLAlchemyError as e:
        print(f"ERROR: Database initialization failed: {e}")
        sys.exit(1)

    print("SUCCESS: Database initialized!")
