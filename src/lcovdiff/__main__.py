"""Allow ``python -m lcovdiff``."""

from lcovdiff.cli.main import main

main()
