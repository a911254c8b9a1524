"""
Entry Point Script (Bootstrap)
==============================
Runs the command-line simulator from a source checkout without installing it.

Usage:
    $ python run.py --preset reference
"""
import sys
import os

# Add the 'src' directory to the Python path
current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from speechrhythm.main import main

if __name__ == "__main__":
    sys.exit(main())
