import sys
import unittest.mock
from contextlib import redirect_stdout
from io import StringIO

from rucker.cli.main import main


def run_cli(*argv: str, stdin: str = "") -> str:
    """Run ``rucker *argv`` and return what it printed."""
    buffer = StringIO()
    with (
        unittest.mock.patch.object(sys, "argv", ["rucker", *argv]),
        unittest.mock.patch.object(sys, "stdin", StringIO(stdin)),
        unittest.mock.patch("rucker.cli.commands.images.supports_color", return_value=False),
        unittest.mock.patch("rucker.cli.commands.info.supports_color", return_value=False),
        redirect_stdout(buffer),
    ):
        main()
    return buffer.getvalue()
