#!/usr/bin/env python
"""
Run the test suite with pytest.

Tests run against throwaway SQLite databases, so no server is needed.

Usage:
    python scripts/run_tests.py [pytest_args]

Examples:
    python scripts/run_tests.py                         # Run all tests with coverage
    python scripts/run_tests.py tests/integration       # Run integration tests
    python scripts/run_tests.py -v tests/unit/test_security.py
"""
import sys
import subprocess
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def run_tests() -> bool:
    """Run tests with pytest."""
    pytest_args = sys.argv[1:]

    # Default pytest arguments if none provided
    if not pytest_args:
        pytest_args = [
            "--cov=chatcrm",
            "--cov-report=term-missing",
            "-v",
            "tests/"
        ]

    print(f"Running tests with args: {' '.join(pytest_args)}")
    result = subprocess.run([sys.executable, "-m", "pytest"] + pytest_args, cwd=PROJECT_ROOT)

    if result.returncode == 0:
        print("✅ All tests passed!")
    else:
        print(f"❌ Tests failed with exit code: {result.returncode}")

    return result.returncode == 0


if __name__ == "__main__":
    sys.exit(0 if run_tests() else 1)
