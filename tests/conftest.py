import logging

import pytest


@pytest.fixture(autouse=True)
def isolate_working_directory(tmp_path, monkeypatch):
    """Run every test from an empty temporary directory.

    The CLI writes CHANGELOG.md relative to the working directory; this
    keeps tests from touching the checkout they run in.
    """
    monkeypatch.chdir(tmp_path)
    yield tmp_path


@pytest.fixture(autouse=True)
def drop_cli_log_handlers():
    """Remove root handlers installed by ``logging.basicConfig`` in the CLI.

    Those handlers write to the stream of a finished ``CliRunner`` run,
    which is closed by the time later tests log anything.
    """
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in before:
            root.removeHandler(handler)
    root.setLevel(level)
