"""ikilog — DLog-style tagged debug logging.

Tag debugging output with colored emoji symbols, retire old output with
a date cutoff, and optionally feed a crash reporter instead of stdout.

Public API:
    TaggedLogger     — filter, format and route tagged messages
    init_logger      — singleton initialization
    get_logger       — access singleton
    log, log_critical, ... log_gray — per-tag functions (singleton)
    vlog, vlog_critical, ...        — reserved verbose no-ops
    Tag              — color tag enumeration
    LoggerConfig     — settings dataclass
    resolve_config   — layered config loading
    ConsoleSink, CrashReportingSink, NullSink — output sinks
"""

from ikilog._version import __version__, __app_name__
from ikilog.tags import Tag, parse_tag, format_tag_list
from ikilog.dates import parse_log_date, should_log_for_date
from ikilog.config import LoggerConfig, resolve_config
from ikilog.sinks import (
    Sink, ConsoleSink, CrashReportingSink, NullSink, build_sinks,
)
from ikilog.logger import (
    LogEvent, TaggedLogger, init_logger, get_logger,
    log, log_critical, log_important, log_highlighted, log_reviewed,
    log_valuable, log_to_be_reviewed, log_gray,
    log_red, log_orange, log_yellow, log_green, log_blue, log_purple,
    vlog, vlog_critical, vlog_important, vlog_highlighted, vlog_reviewed,
    vlog_valuable, vlog_to_be_reviewed, vlog_gray,
)

__all__ = [
    '__version__', '__app_name__',
    'Tag', 'parse_tag', 'format_tag_list',
    'parse_log_date', 'should_log_for_date',
    'LoggerConfig', 'resolve_config',
    'Sink', 'ConsoleSink', 'CrashReportingSink', 'NullSink', 'build_sinks',
    'LogEvent', 'TaggedLogger', 'init_logger', 'get_logger',
    'log', 'log_critical', 'log_important', 'log_highlighted', 'log_reviewed',
    'log_valuable', 'log_to_be_reviewed', 'log_gray',
    'log_red', 'log_orange', 'log_yellow', 'log_green', 'log_blue',
    'log_purple',
    'vlog', 'vlog_critical', 'vlog_important', 'vlog_highlighted',
    'vlog_reviewed', 'vlog_valuable', 'vlog_to_be_reviewed', 'vlog_gray',
]
