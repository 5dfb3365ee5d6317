"""Serverless entry point for coffee-api.

Run locally:
  uvicorn api.index:app --reload
"""

from pathlib import Path
import sys

# Ensure local src package is importable in serverless runtime.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from coffee_api.app import create_app  # noqa: E402

app = create_app()
