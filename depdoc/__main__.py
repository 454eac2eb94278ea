"""CLI entry point: python -m depdoc"""

from depdoc.cli import main

main(prog_name="dep-doc")
