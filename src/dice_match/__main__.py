"""Allow running the package with ``python -m dice_match``."""

import sys

from .cli import main

sys.exit(main())
