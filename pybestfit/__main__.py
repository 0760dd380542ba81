import sys

from pybestfit.cli import main

sys.exit(main())
