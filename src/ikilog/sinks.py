"""
Output sinks for formatted log records.

A sink receives one fully formatted record per physical line of a
message. Which sinks a logger writes to is decided once, when the
logger is built:

    crash reporting   mirror   sinks
    ---------------   ------   ------------------------------
    off               -        ConsoleSink
    on                yes      CrashReportingSink, ConsoleSink
    on                no       CrashReportingSink

Debug builds mirror to the console; release builds only feed the
crash reporter so end users never see debugging output.
"""

import logging
import sys
from typing import Callable, List, Optional, TextIO

# Crash-reporting SDKs hook into stdlib logging; attach their handler here.
CRASH_LOGGER_NAME = 'ikilog.crash'


class Sink:
    """Destination for formatted records.

    Subclasses implement _write(). write() never raises: logging must
    not be able to break the code that calls it.
    """

    def write(self, record: str) -> None:
        try:
            self._write(record)
        except Exception as exc:
            self.handle_error(record, exc)

    def _write(self, record: str) -> None:
        raise NotImplementedError

    def handle_error(self, record: str, exc: Exception) -> None:
        """Called when _write() fails. The default drops the record."""


class ConsoleSink(Sink):
    """Print records to a stream (default: stderr)."""

    def __init__(self, file: TextIO = None):
        self._file = file

    @property
    def file(self) -> TextIO:
        # Resolved per write so swapped/captured stderr is honoured
        return self._file if self._file is not None else sys.stderr

    def _write(self, record: str) -> None:
        print(record, file=self.file)


class CrashReportingSink(Sink):
    """Forward records to a crash-reporting service as custom log lines.

    Args:
        reporter: Callable taking the record string. Defaults to INFO on
                  the 'ikilog.crash' stdlib logger, where a crash
                  reporter's logging integration picks it up as a
                  breadcrumb.
    """

    def __init__(self, reporter: Optional[Callable[[str], None]] = None):
        if reporter is None:
            reporter = logging.getLogger(CRASH_LOGGER_NAME).info
        self.reporter = reporter

    def _write(self, record: str) -> None:
        self.reporter(record)


class NullSink(Sink):
    """Discard everything."""

    def _write(self, record: str) -> None:
        pass


def build_sinks(config, file: TextIO = None,
                reporter: Optional[Callable[[str], None]] = None) -> List[Sink]:
    """Select the sinks for a LoggerConfig.

    Args:
        config: LoggerConfig to read the sink switches from
        file: Stream for the console sink (default: stderr)
        reporter: Callable for the crash-reporting sink

    Returns:
        List of sinks; [NullSink()] when nothing is selected.
    """
    sinks: List[Sink] = []
    if config.crash_reporting_active:
        sinks.append(CrashReportingSink(reporter))
        if config.console and config.crash_reporting_mirror_console:
            sinks.append(ConsoleSink(file))
    elif config.console:
        sinks.append(ConsoleSink(file))
    return sinks or [NullSink()]
