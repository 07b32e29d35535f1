"""python -m patchscan"""

import sys

from patchscan.presentation.cli import main

sys.exit(main())
