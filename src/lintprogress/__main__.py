import sys

from lintprogress.cli import main

sys.exit(main())
