"""Allow ``python -m ikilog``."""

import sys

from ikilog.cli import main

sys.exit(main())
