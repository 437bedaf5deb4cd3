"""The BasisSculpt loggers."""

from __future__ import annotations

import os
import sys
import types
import logging
import contextlib
from typing import ClassVar

from .common import PathLike

__all__ = ["logger", "report_logger", "stdout_handler", "EnableFileHandler", "EnableReportHandler"]

#: The BasisSculpt logger.
logger = logging.getLogger("basissculpt")
logger.setLevel(logging.DEBUG)

#: The logger of the summary report; its records never reach :data:`logger`.
report_logger = logging.getLogger("basissculpt.report")
report_logger.setLevel(logging.INFO)
report_logger.propagate = False

#: The BasisSculpt stdout handler.
stdout_handler = logging.StreamHandler(stream=sys.stdout)
stdout_handler.setLevel(logging.DEBUG)
stdout_handler.setFormatter(logging.Formatter(
    fmt='[%(asctime)s] %(levelname)s: %(message)s',
    datefmt='%H:%M:%S',
))
logger.addHandler(stdout_handler)


class EnableFileHandler(contextlib.ContextDecorator):
    """Add a file handler to the BasisSculpt loggers.

    Attributes
    ----------
    handler : logging.FileHandler
        The relevant titular handler.

    """

    __slots__ = ("handler",)

    LOGGERS: ClassVar[tuple[logging.Logger, ...]] = (logger,)

    def __init__(self, path: PathLike) -> None:
        """Initialize the context manager.

        Parameters
        ----------
        path : path-like object
            Path to the log file.

        """
        self.handler = logging.FileHandler(os.fsdecode(path), mode="w")
        self.handler.setLevel(logging.DEBUG)
        self.handler.setFormatter(self._formatter())

    @staticmethod
    def _formatter() -> logging.Formatter:
        return logging.Formatter(
            fmt='%(asctime)s---%(levelname)s\n%(message)s\n',
            datefmt='%H:%M:%S',
        )

    def __enter__(self) -> None:
        """Add the file handler."""
        for logger in self.LOGGERS:
            if self.handler not in logger.handlers:
                logger.addHandler(self.handler)

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        exc_traceback: types.TracebackType | None,
    ) -> None:
        """Remove and close the file handler."""
        for logger in self.LOGGERS:
            if self.handler in logger.handlers:
                logger.removeHandler(self.handler)
        self.handler.close()


class EnableReportHandler(EnableFileHandler):
    """Write the summary report to a file.

    Attributes
    ----------
    handler : logging.FileHandler
        The relevant titular handler.

    """

    __slots__ = ()

    LOGGERS: ClassVar[tuple[logging.Logger, ...]] = (report_logger,)

    @staticmethod
    def _formatter() -> logging.Formatter:
        return logging.Formatter(fmt='%(message)s')
