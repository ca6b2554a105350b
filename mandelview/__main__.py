"""
Allow running the package directly: python -m mandelview
"""
import sys

from .app import main

sys.exit(main())
