"""Allows running the demonstration with `python -m lterm`."""

import sys

from lterm.lc import main

sys.exit(main())
