"""Allow ``python -m category_sorter``."""

from .cli.main import cli

cli()
