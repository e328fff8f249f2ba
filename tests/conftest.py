#
# Pytest Fixtures
#

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest
from typing import Callable, NamedTuple

# Local ----------------------------------------------------------------------------------------------------------------
from repnum.cli import main


class CliRun(NamedTuple):
    code: int
    out: str
    err: str


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def run_cli(capsys) -> Callable[..., CliRun]:
    """Fixture to run the CLI on the given args and capture exit code, stdout and stderr."""

    def _run(*args: str) -> CliRun:
        code = main(list(args))
        captured = capsys.readouterr()
        return CliRun(code, captured.out, captured.err)

    return _run
