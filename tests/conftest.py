import logging

import pytest
from click.testing import CliRunner

from csvgate.utils.logging_utils import ROOT_LOGGER_NAME


@pytest.fixture
def make_file(tmp_path):
    """Create a file under tmp_path from text or bytes and return its path."""

    def _make(content, name="data.csv"):
        path = tmp_path / name
        if isinstance(content, str):
            content = content.encode("utf-8")
        path.write_bytes(content)
        return path

    return _make


@pytest.fixture
def runner():
    """Create a Click test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_csvgate_logging():
    """Leave the csvgate logger without handlers between tests."""
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def parse_report(text: str) -> dict[int, str]:
    """Parse "LINE <n>: <content>" entries into a line-number mapping."""
    entries = {}
    for line in text.splitlines():
        prefix, _, content = line.partition(": ")
        assert prefix.startswith("LINE ")
        entries[int(prefix[len("LINE "):])] = content
    return entries


@pytest.fixture
def report_parser():
    return parse_report
