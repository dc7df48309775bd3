"""Allows running the cipher via: python -m caesar"""

import sys

from caesar.main import main

if __name__ == "__main__":
    sys.exit(main())
