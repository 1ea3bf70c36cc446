import sys

from symbolgen.cli import main

sys.exit(main())
