"""
Main module entry point.

This allows running the demo as: python -m smart_home.main
"""

from .app import main

if __name__ == "__main__":
    main()
