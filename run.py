"""
Entry Point Script (Bootstrap)
==============================
Development runner that lives outside the 'src' package.

It puts 'src' on 'sys.path' so 'from pointfield...' resolves without
installing the package.

Usage:
    $ python run.py
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from pointfield.main import main

if __name__ == "__main__":
    main()
