#!/usr/bin/env python3
"""
Alias Tips - suggest shell aliases for the command you are about to run.

Development entry point; the installed console script is ``alias-tips``.
"""

import sys
from pathlib import Path

# Add src to path for development
src_path = Path(__file__).parent / "src"
if src_path.exists():
    sys.path.insert(0, str(src_path))

from alias_tips.main import main


if __name__ == "__main__":
    sys.exit(main())
