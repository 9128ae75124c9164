"""
Seed the database with essential data (admin user and demo project).

Runs the seed module in a subprocess so the exit status is propagated
unchanged to the calling shell or Makefile target.

Usage:
    python scripts/seed_db.py
"""

import subprocess
import os
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def seed() -> int:
    """Run chatcrm.scripts.seed and return its exit status."""
    result = subprocess.run(
        [sys.executable, "-m", "chatcrm.scripts.seed"],
        cwd=PROJECT_ROOT,
        env={**os.environ, "PYTHONPATH": str(PROJECT_ROOT)}
    )
    if result.returncode == 0:
        print("🌱 Seed data created.")
    else:
        print("⚠️ Seeding failed. Check the log output above.")
    return result.returncode


if __name__ == "__main__":
    sys.exit(seed())
