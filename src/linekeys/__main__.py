"""Allow running linekeys with ``python -m linekeys``."""

import sys

from .cli import main

sys.exit(main())
