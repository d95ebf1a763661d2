"""Allow ``python -m create_frontend_setup``."""

import sys

from create_frontend_setup.cli import main

if __name__ == "__main__":
    sys.exit(main())
