import sys

from passgrade.cli import main

sys.exit(main())
