"""
Main entry point for running the package as a module.

Usage:
    python -m variantgen generate photos/sunset.png --map landscapes
    python -m variantgen remove photos/sunset.png --map landscapes
    python -m variantgen paths photos/sunset.png --map landscapes
"""

import sys
from .cli import main

if __name__ == '__main__':
    sys.exit(main())
