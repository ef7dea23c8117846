"""Allow ``python -m vitetags``."""

from vitetags.ui.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
