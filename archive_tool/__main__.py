"""Allow `python -m archive_tool`."""
import sys

from archive_tool.controllers.cli_controller import main

sys.exit(main())
