"""Shared fixtures for taskpad tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

import pytest
from click.testing import CliRunner

from taskpad.logging_setup import LOGGER_NAME
from taskpad.manager import TaskManager
from taskpad.models import Priority
from taskpad.session import TaskSession


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Undo handler changes made by setup_logging between tests."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a CLI runner."""
    return CliRunner()


@pytest.fixture
def manager() -> TaskManager:
    """Create an empty task manager."""
    return TaskManager()


@pytest.fixture
def populated_manager(manager: TaskManager) -> TaskManager:
    """Create a manager holding a small mix of tasks."""
    manager.add_task("Write report", "Quarterly numbers", Priority.HIGH)
    manager.add_task("Call Bob", "re: report", Priority.LOW)
    manager.add_task("Buy Milk", "", Priority.MEDIUM)
    manager.complete_task(2)
    return manager


@pytest.fixture
def run_session(cli_runner: CliRunner) -> Callable[..., str]:
    """Run a TaskSession against scripted input lines, returning stdout."""

    def _run(session: TaskSession, *lines: str) -> str:
        text = "".join(f"{line}\n" for line in lines)
        with cli_runner.isolation(input=text) as streams:
            session.run()
        return streams[0].getvalue().decode()

    return _run
