# topmark:header:start
#
#   project      : ColorTag
#   file         : __main__.py
#   file_relpath : src/colortag/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running ColorTag via ``python -m colortag``.

It delegates directly to :func:`colortag.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how ColorTag is launched.

Examples:
    Render a template::

        python -m colortag render '#BOLD#hello#RST#'
"""

from __future__ import annotations

from colortag.cli.main import cli

if __name__ == "__main__":
    cli()
