"""
Caesar Module Entry Point
==========================

Allows running the CLI via: python -m caesar
"""

from caesar.cli import main

if __name__ == "__main__":
    main()
