import sys

from filerbac.cli import main

sys.exit(main())
