import sys

from qamber.cli import main

sys.exit(main())
