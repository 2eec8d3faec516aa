"""Compatibility wrapper for checking a paper against a reference.

Use the packaged CLI instead:
    python -m paper_check.cli PAPER REFERENCE RESULT
or install the package and run `paper-check PAPER REFERENCE RESULT`.
"""

from paper_check.cli import cli


if __name__ == "__main__":
    cli()
