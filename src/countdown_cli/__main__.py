"""Allow running as ``python -m countdown_cli``."""

from countdown_cli.main import main

main()
