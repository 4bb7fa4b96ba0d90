"""Allow running as ``python -m mrtgtraf``."""

import sys

from mrtgtraf.cli import main

sys.exit(main())
