"""Allow running as ``python -m table_reader``."""

import sys

from table_reader.cli import main

sys.exit(main())
