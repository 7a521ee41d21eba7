"""
Development server launcher.

Loads the .env file and runs the snoozy API with uvicorn in reload mode.

Usage:
    python scripts/run_dev.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("Snoozy Development Server")
    print("=" * 60)
    print("API:  http://localhost:8000/api/v1")
    print("Docs: http://localhost:8000/docs")
    print("Press Ctrl+C to stop")
    print("=" * 60)

    uvicorn.run("snoozy.main:app", host="0.0.0.0", port=8000, reload=True, log_level="info")
