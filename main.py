#!/usr/bin/env python3
"""Editr - a small terminal text editor.

Usage:
    python main.py [filename]

Controls:
    Arrow keys, PageUp/PageDown, Home/End: Move the cursor
    Ctrl-S: Save file
    Ctrl-Q: Quit (asks for confirmation if modified)
    Ctrl-F: Search
    Ctrl-H: Help
"""

import sys
from editr.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
