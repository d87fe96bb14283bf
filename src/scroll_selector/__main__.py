"""Allow running as ``python -m scroll_selector``."""

import sys

from scroll_selector.cli import main

sys.exit(main())
