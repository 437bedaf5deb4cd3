from __future__ import annotations

import os
from collections.abc import Generator

import pytest
from basissculpt._logger import logger as basissculpt_logger


@pytest.fixture(autouse=True, scope="session")
def is_release() -> Generator[bool, None, None]:
    """Yield whether the test suite is run for a BasisSculpt release or not."""
    env_var = os.environ.get("IS_RELEASE", 0)
    try:
        yield bool(int(env_var))
    except ValueError as ex:
        raise ValueError("The `IS_RELEASE` environment variable expected an integer") from ex


@pytest.fixture(autouse=True, scope="session")
def prepare_logger() -> Generator[None, None, None]:
    """Remove the logging output to stdout while running tests."""
    handlers = basissculpt_logger.handlers.copy()
    for handler in handlers:
        basissculpt_logger.removeHandler(handler)

    yield None

    for handler in handlers:
        basissculpt_logger.addHandler(handler)
