#!/usr/bin/env python3
"""
Main entry point for running nucgrep as a module.
"""

from .main import main

if __name__ == "__main__":
    main()
