"""Allow ``python -m backforge``."""

import sys

from backforge.cli import main

sys.exit(main())
