import sys

from import_inspector.cli import main

sys.exit(main())
