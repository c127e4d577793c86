"""UI configuration constants.

Centralizes magic numbers and configuration values for the UI module.
"""


class LogLevel:
    """Log level constants with numeric values for comparison.

    Standard logging hierarchy: DEBUG < INFO < WARNING < ERROR
    Lower numeric value = more verbose (shows more messages).
    """

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    _names = {
        DEBUG: "DEBUG",
        INFO: "INFO",
        WARNING: "WARNING",
        ERROR: "ERROR",
    }

    _from_string = {
        "debug": DEBUG,
        "info": INFO,
        "warning": WARNING,
        "error": ERROR,
    }

    @classmethod
    def name(cls, level: int) -> str:
        """Get the name for a log level."""
        return cls._names.get(level, "UNKNOWN")

    @classmethod
    def from_string(cls, level_str: str) -> int:
        """Convert string to log level. Returns DEBUG if invalid."""
        return cls._from_string.get(level_str.lower(), cls.DEBUG)


# Log panel configuration
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"
LOG_MAX_MESSAGE_LENGTH = 500  # Characters before truncating log messages

# Transcript configuration
CHAT_TIMESTAMP_FORMAT = "%H:%M:%S"

# Worker group for model requests
LLM_WORKER_GROUP = "llm"

# Initial captions of the registered widgets
TITLE_TEXT = "AI Control Panel"
SAMPLE_TEXT = "Sample text"
BUTTON1_TEXT = "Button 1"
BUTTON2_TEXT = "Button 2"
EXECUTE_TEXT = "🚀 Execute"
COMMAND_PLACEHOLDER = "Type an instruction, e.g. hide button one, change the title to red..."
