import sys

from lintopts.cli import main

sys.exit(main())
