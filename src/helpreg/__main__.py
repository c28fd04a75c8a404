"""Allow ``python -m helpreg``."""

import sys

from helpreg.cli import main

sys.exit(main())
