import sys

from script_automation.cli import main

sys.exit(main())
