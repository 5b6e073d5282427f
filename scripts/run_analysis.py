#!/usr/bin/env python3
"""Time series analysis runner script.

Examples:
    python scripts/run_analysis.py 1 2 3 4 100 --window 3 --method iqr --threshold 1.5
    python scripts/run_analysis.py --csv prices.csv --column close --json
"""
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))

from tsanalysis.runner import main

if __name__ == "__main__":
    sys.exit(main())
