"""Application constants."""

SEVERITY_NON_FATAL = "non_fatal"
SEVERITY_FATAL = "fatal"
SEVERITIES = (SEVERITY_NON_FATAL, SEVERITY_FATAL)
RETRYABLE_STATUS_CODES = (408, 425, 429, 500, 502, 503, 504)
DEFAULT_FATAL_EXCEPTIONS = (
    "MemoryError",
    "RecursionError",
    "SystemError",
    "KeyboardInterrupt",
    "SystemExit",
)
DEFAULT_NON_FATAL_EXCEPTIONS = (
    "TimeoutError",
    "ConnectionError",
    "InterruptedError",
    "BlockingIOError",
)
EXIT_SUCCESS = 0
EXIT_FATAL = 10
EXIT_HARD_FAIL = 20
JSON_LOG_FIELDS = (
    "timestamp",
    "logger",
    "level",
    "event",
    "severity",
    "error_type",
    "error_code",
    "policy",
    "message",
)
