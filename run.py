"""
Entry Point Script (Bootstrap)
==============================
Development runner that works without installing the package.

It adds the 'src' directory to the Python path so imports like
'from linecanvas.model...' resolve.

Usage:
    $ python run.py
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from linecanvas.main import main

if __name__ == "__main__":
    main()
