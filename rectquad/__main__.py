"""Entry point for running the command line.

Usage:
    python -m rectquad run --lo 0 --hi 1 --precision 1e-3 --function "exp(x)" --derivative "exp(x)"
"""

import sys

from rectquad.cli import main

if __name__ == "__main__":
    sys.exit(main())
