"""Run script.

Why it exists:
- Allows `python -m main` from inside `src/` during development.
- Keeps a simple entry point next to the `storefront-cms` console script.
"""

from __future__ import annotations

import sys

# Workaround for UnicodeEncodeError on Windows terminals (cp1252 vs utf-8);
# CMS content is full of non-ASCII text.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
