"""
TaggedLogger — DLog-style debugging output with color tags.

Every call carries a tag, a message and the date the call was written:

    log("data {}".format(data), date="2016-Jul-28")
    log_highlighted("", date="2016-Jul-28")
    log_critical(f"error {error}", date="2016-Jul-28")

A call is emitted when logging is enabled, the message is present and
the date passes the cutoff (CRITICAL always passes). Each line of the
message becomes one record:

    ikiApps ‼️ -[views.py:42] refresh - error timeout
    ikiApps -[views.py:42] refresh - error timeout     (use_color off)

The file, function and line are taken from the caller's frame unless
passed explicitly. Nothing here raises into the calling code; anything
that cannot be parsed or formatted is dropped.
"""

import os
import sys
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, TextIO

from .config import LoggerConfig
from .dates import should_log_for_date
from .sinks import Sink, build_sinks
from .tags import Tag

_SINK_FIELDS = {'crash_reporting_active', 'crash_reporting_mirror_console',
                'console'}


@dataclass
class LogEvent:
    """One log call. Built per call and consumed immediately."""
    tag: Tag
    message: str
    date: Optional[str]
    file: str
    function: str
    line: int


def _call_site(depth: int):
    """Return (file, function, line) for the frame `depth` levels above the caller."""
    try:
        frame = sys._getframe(depth + 1)
    except ValueError:
        return '<unknown>', '<unknown>', 0
    code = frame.f_code
    return code.co_filename, code.co_name, frame.f_lineno


class TaggedLogger:
    """Filter, format and route tagged debug messages.

    Usage::

        logger = TaggedLogger(LoggerConfig(use_color=True))
        logger.log_important("cache warmed", date="2017-May-01")
        logger.suppress_before_date = "2017-Jan-01"
    """

    def __init__(self, config: LoggerConfig = None,
                 sinks: Sequence[Sink] = None, *, file: TextIO = None,
                 reporter: Optional[Callable[[str], None]] = None):
        self.config = config if config is not None else LoggerConfig()
        # file and reporter are kept so configure() can re-select sinks
        self._file = file
        self._reporter = reporter
        self._auto_sinks = sinks is None
        self.sinks: List[Sink] = (list(sinks) if sinks is not None
                                  else self._build_sinks())

    def _build_sinks(self) -> List[Sink]:
        return build_sinks(self.config, file=self._file,
                           reporter=self._reporter)

    # ------------------------------------------------------------------
    # Runtime settings
    # ------------------------------------------------------------------
    @property
    def enabled(self) -> bool:
        return self.config.enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self.config.enabled = bool(value)

    @property
    def suppress_before_date(self) -> str:
        return self.config.suppress_before_date

    @suppress_before_date.setter
    def suppress_before_date(self, value: str) -> None:
        self.config.suppress_before_date = value

    @property
    def prefix(self) -> str:
        return self.config.prefix

    @prefix.setter
    def prefix(self, value: str) -> None:
        self.config.prefix = value

    @property
    def use_color(self) -> bool:
        return self.config.use_color

    @use_color.setter
    def use_color(self, value: bool) -> None:
        self.config.use_color = bool(value)

    def configure(self, **changes) -> LoggerConfig:
        """Change several settings at once.

        Sinks chosen from the config are re-selected when a sink switch
        changes; sinks passed to the constructor are left alone.
        """
        self.config = self.config.replace(**changes)
        if self._auto_sinks and _SINK_FIELDS & set(changes):
            self.sinks = self._build_sinks()
        return self.config

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------
    def format_record(self, tag: Tag, text: str, file: str,
                      function: str, line: int) -> str:
        """Format one physical line of a message."""
        location = f"-[{os.path.basename(file)}:{line}] {function} - {text}"
        if self.config.use_color:
            return f"{self.config.prefix} {tag.glyph} {location}"
        return f"{self.config.prefix} {location}"

    def should_emit(self, event: LogEvent) -> bool:
        """Apply the enable switch and the date policy to an event."""
        if event.message is None or not self.config.enabled:
            return False
        if event.date is None:
            return self.config.log_undated
        return should_log_for_date(event.date, event.tag,
                                   self.config.suppress_before_date)

    def emit(self, tag: Tag, message: Optional[str], date: Optional[str] = None,
             file: str = '', function: str = '', line: int = 0) -> None:
        """Emit a message to every sink if it passes the filters.

        Args:
            tag: Color tag of the call
            message: Text to log; may span several lines. None is a no-op.
            date: Date the call was written (yyyy-MMM-dd)
            file: Source file of the call site
            function: Function name of the call site
            line: Line number of the call site
        """
        event = LogEvent(tag, message, date, file, function, line)
        if not self.should_emit(event):
            return
        try:
            records = [self.format_record(tag, text, file, function, line)
                       for text in str(message).split('\n')]
        except Exception:
            # Unformattable message or call site: drop the event
            return
        for record in records:
            for sink in self.sinks:
                sink.write(record)

    def _log_from(self, tag, message, date, file, function, line,
                  stacklevel=1):
        """Emit with call-site metadata taken from the caller's frame.

        stacklevel=1 means the frame that called the public function
        which called this method.
        """
        if message is None or not self.config.enabled:
            return
        if file is None or function is None or line is None:
            site_file, site_function, site_line = _call_site(stacklevel + 1)
            file = site_file if file is None else file
            function = site_function if function is None else function
            line = site_line if line is None else line
        self.emit(tag, message, date, file, function, line)

    # ------------------------------------------------------------------
    # One method per tag
    # ------------------------------------------------------------------
    def log(self, message, date=None, *, file=None, function=None, line=None):
        self._log_from(Tag.NONE, message, date, file, function, line)

    def log_critical(self, message, date=None, *, file=None, function=None,
                     line=None):
        """Log in red. Never suppressed by the date cutoff."""
        self._log_from(Tag.CRITICAL, message, date, file, function, line)

    def log_important(self, message, date=None, *, file=None, function=None,
                      line=None):
        self._log_from(Tag.IMPORTANT, message, date, file, function, line)

    def log_highlighted(self, message, date=None, *, file=None, function=None,
                        line=None):
        self._log_from(Tag.HIGHLIGHTED, message, date, file, function, line)

    def log_reviewed(self, message, date=None, *, file=None, function=None,
                     line=None):
        self._log_from(Tag.REVIEWED, message, date, file, function, line)

    def log_valuable(self, message, date=None, *, file=None, function=None,
                     line=None):
        self._log_from(Tag.VALUABLE, message, date, file, function, line)

    def log_to_be_reviewed(self, message, date=None, *, file=None,
                           function=None, line=None):
        self._log_from(Tag.TO_BE_REVIEWED, message, date, file, function, line)

    def log_gray(self, message, date=None, *, file=None, function=None,
                 line=None):
        self._log_from(Tag.NOT_IMPORTANT, message, date, file, function, line)

    # ------------------------------------------------------------------
    # Verbose family: reserved, not wired to any output
    # ------------------------------------------------------------------
    def vlog(self, message, date=None):
        """Verbose logging is not implemented; does nothing."""

    def vlog_critical(self, message, date=None):
        pass

    def vlog_important(self, message, date=None):
        pass

    def vlog_highlighted(self, message, date=None):
        pass

    def vlog_reviewed(self, message, date=None):
        pass

    def vlog_valuable(self, message, date=None):
        pass

    def vlog_to_be_reviewed(self, message, date=None):
        pass

    def vlog_gray(self, message, date=None):
        pass


# =============================================================================
# Module-level singleton
# =============================================================================

_logger: Optional[TaggedLogger] = None


def init_logger(config: LoggerConfig = None, *, file=None, reporter=None,
                **overrides) -> TaggedLogger:
    """Initialize the module-level TaggedLogger singleton.

    Call once at startup. Keyword overrides are applied on top of
    `config`, e.g. ``init_logger(use_color=True, enabled=True)``.

    Args:
        config: Base configuration (default: LoggerConfig())
        file: Stream for the console sink (default: stderr)
        reporter: Callable for the crash-reporting sink
        **overrides: LoggerConfig fields to change

    Returns:
        The initialized TaggedLogger instance
    """
    global _logger

    config = config if config is not None else LoggerConfig()
    if overrides:
        config = config.replace(**overrides)

    _logger = TaggedLogger(config, file=file, reporter=reporter)
    return _logger


def get_logger() -> TaggedLogger:
    """Get the module-level TaggedLogger, creating a default if needed."""
    global _logger
    if _logger is None:
        _logger = TaggedLogger()
    return _logger


# =============================================================================
# Module-level functions (delegate to the singleton)
# =============================================================================

def log(message, date=None, *, file=None, function=None, line=None):
    get_logger()._log_from(Tag.NONE, message, date, file, function, line)


def log_critical(message, date=None, *, file=None, function=None, line=None):
    """Log in red; always logged regardless of the date cutoff."""
    get_logger()._log_from(Tag.CRITICAL, message, date, file, function, line)


def log_important(message, date=None, *, file=None, function=None, line=None):
    get_logger()._log_from(Tag.IMPORTANT, message, date, file, function, line)


def log_highlighted(message, date=None, *, file=None, function=None,
                    line=None):
    get_logger()._log_from(Tag.HIGHLIGHTED, message, date, file, function,
                           line)


def log_reviewed(message, date=None, *, file=None, function=None, line=None):
    get_logger()._log_from(Tag.REVIEWED, message, date, file, function, line)


def log_valuable(message, date=None, *, file=None, function=None, line=None):
    get_logger()._log_from(Tag.VALUABLE, message, date, file, function, line)


def log_to_be_reviewed(message, date=None, *, file=None, function=None,
                       line=None):
    get_logger()._log_from(Tag.TO_BE_REVIEWED, message, date, file, function,
                           line)


def log_gray(message, date=None, *, file=None, function=None, line=None):
    get_logger()._log_from(Tag.NOT_IMPORTANT, message, date, file, function,
                           line)


# Color spellings
log_red = log_critical
log_orange = log_important
log_yellow = log_highlighted
log_green = log_reviewed
log_blue = log_valuable
log_purple = log_to_be_reviewed


def vlog(message, date=None):
    """Verbose logging is not implemented; the vlog family does nothing."""


def vlog_critical(message, date=None):
    pass


def vlog_important(message, date=None):
    pass


def vlog_highlighted(message, date=None):
    pass


def vlog_reviewed(message, date=None):
    pass


def vlog_valuable(message, date=None):
    pass


def vlog_to_be_reviewed(message, date=None):
    pass


def vlog_gray(message, date=None):
    pass
