import sys

from citebuilder.cli import main

sys.exit(main())
