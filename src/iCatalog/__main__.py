"""Allow ``python -m iCatalog`` to launch the desktop browser."""

import sys

from .gui.app import main

if __name__ == "__main__":
    sys.exit(main())
