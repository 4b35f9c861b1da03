"""
Entry Point Script (Bootstrap)
==============================
This script is the starting point of the application during development.

Why is this file needed?
------------------------
1. It is located outside the 'src' package to act as a convenient runner.
2. It modifies 'sys.path' so that 'from ghanfoot...' imports resolve without
   installing the package first.

Usage:
    $ python run.py [--debug] [--log-file app.log]
"""
import sys
import os

# Add the 'src' directory to the Python path
current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from ghanfoot.__main__ import cli

if __name__ == "__main__":
    sys.exit(cli())
