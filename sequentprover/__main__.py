"""Allow running as ``python -m sequentprover``."""

import sys

from sequentprover.cli import main

sys.exit(main())
