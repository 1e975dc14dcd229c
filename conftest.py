"""
Root conftest.py - Sets up Python path for tests.

This conftest is loaded by pytest before any test collection begins.
"""
import sys
import os

# Get the project root (where this conftest.py lives)
PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))

# Make `import tintmath` resolve to this checkout even without an install
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)
