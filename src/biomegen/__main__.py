"""Allow ``python -m biomegen``."""

import sys

from .terrain.cli import main

sys.exit(main())
