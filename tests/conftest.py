import sys
from pathlib import Path

# project root on sys.path so tests import gcd_engine without an install
ROOT = Path(__file__).resolve().parents[1]
root_str = str(ROOT)
if root_str not in sys.path:
    sys.path.insert(0, root_str)
