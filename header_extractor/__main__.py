"""
python -m header_extractor <header.h> [options]
"""
import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
