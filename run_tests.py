#!/usr/bin/env python3
"""Test runner script for kanaset.

Extra arguments are handed to pytest, e.g. ``./run_tests.py -k converter``.
"""

import os
import subprocess
import sys
from typing import List

PROJECT_DIR = os.path.dirname(os.path.abspath(__file__))


def build_command(pytest_args: List[str]) -> List[str]:
    """Return the pytest command line for *pytest_args*."""
    return [sys.executable, "-m", "pytest", "tests/", "--tb=short", *pytest_args]


def run_tests(pytest_args: List[str]) -> int:
    """Run the suite from the project directory and return pytest's exit code."""
    print("🧪 Running kanaset Tests")
    print("=" * 50)
    result = subprocess.run(build_command(pytest_args), cwd=PROJECT_DIR, check=False)
    return result.returncode


if __name__ == "__main__":
    returncode = run_tests(sys.argv[1:])
    if returncode == 0:
        print("\n✅ All tests passed!")
    else:
        print("\n❌ Some tests failed!")
    sys.exit(returncode)
