"""Allow ``python -m letras``."""

import sys

from letras.cli import main

sys.exit(main())
