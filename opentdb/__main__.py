# opentdb/__main__.py
import sys

from opentdb.cli import main

sys.exit(main())
