import sys

from minic.cli import main

sys.exit(main())
