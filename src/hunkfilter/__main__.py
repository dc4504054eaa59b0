import sys

from hunkfilter.cli import main

sys.exit(main())
