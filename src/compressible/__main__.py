"""Allow ``python -m compressible``."""

import sys

from .cli import main

sys.exit(main())
