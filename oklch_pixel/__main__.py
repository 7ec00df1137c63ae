"""Allow `python -m oklch_pixel`."""

import sys

from oklch_pixel.cli import main

sys.exit(main())
