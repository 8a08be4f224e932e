#!/usr/bin/env python
"""
Instafilter - Root-level launcher
"""

import sys
from pathlib import Path

# Add project root to sys.path so the instafilter package is importable
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from instafilter.main import main

if __name__ == "__main__":
    main()
