"""
Makes the colourcore package importable when pytest runs from a source checkout.
"""
import sys
import os

PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)
