"""
Entry Point Script (Bootstrap)
==============================
Runs the objmesh command-line interface straight from a source checkout.

It prepends 'src' to 'sys.path' so imports like 'from objmesh.model...'
resolve without installing the package.

Usage:
    $ python run.py assets/textured_quad.obj --log-level INFO
"""
import sys
import os

# Add the 'src' directory to the Python path
current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from objmesh.__main__ import main

if __name__ == "__main__":
    sys.exit(main())
