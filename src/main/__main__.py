"""
Main module entry point.

This allows running the prediction report as: python -m src.main
"""

from .report import main

if __name__ == "__main__":
    raise SystemExit(main())
