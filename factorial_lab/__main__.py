import sys

from factorial_lab.app_shell.cli import main

sys.exit(main())
