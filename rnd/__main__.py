"""Allow ``python -m rnd``."""

import sys

from rnd.cli import main

sys.exit(main())
