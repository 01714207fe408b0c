import sys

from x86_64_level.cli import main

sys.exit(main())
