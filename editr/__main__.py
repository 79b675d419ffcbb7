"""Editr CLI entry point.

Allows running via `python -m editr` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import sys
from typing import Optional

from .version import get_version_string


def main(argv: Optional[list[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return 0
    if len(args) > 1:
        print("Too many arguments")
        return 1

    # Lazy import to avoid importing UI deps for --version
    from .editor import Editor
    from .constants import EditorConstants
    from .logging_config import configure_logging

    configure_logging()
    editor = Editor()
    if args:
        editor.load_file(args[0])
    try:
        status = editor.run()
    except KeyboardInterrupt:
        return 130
    if status == 0:
        print(EditorConstants.GOODBYE_MESSAGE)
    return status


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
