import sys

from polyrecon.cli import main

sys.exit(main())
