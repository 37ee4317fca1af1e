"""
pwcheck Module Entry Point
===========================

Allows running the pwcheck CLI via: python -m pwcheck
"""

from pwcheck.cli import main

if __name__ == "__main__":
    main()
