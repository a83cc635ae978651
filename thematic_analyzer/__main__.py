"""Allow running the analyzer with ``python -m thematic_analyzer``."""

import sys

from .main import main

sys.exit(main())
