"""Error types shared across aicontrol modules.

Every error a command can run into while a session is connected derives from
AIControlError. The dispatcher turns these into a transcript line and a
"failed" status; anything else that escapes a mutation is reported as an
execution error.
"""


class AIControlError(Exception):
    """Base class for recoverable aicontrol errors."""


class ColorParseError(AIControlError):
    """A color literal could not be recognized."""

    def __init__(self, text: str):
        super().__init__(f"cannot recognize color: {text}")
        self.text = text


class HistoryColorNotFoundError(AIControlError):
    """A history index points past the end of the color history."""

    def __init__(self, index: int, size: int):
        super().__init__(
            f"history color {index} does not exist, "
            f"only {size} history colors available"
        )
        self.index = index
        self.size = size


class WidgetNotFoundError(AIControlError):
    """No widget is registered under the requested identifier."""

    def __init__(self, widget_id: str):
        super().__init__(f"component not found: {widget_id}")
        self.widget_id = widget_id


class CapabilityError(AIControlError):
    """The widget does not support the requested mutation."""

    def __init__(self, widget_id: str, capability: str):
        super().__init__(f"component {widget_id} does not support {capability}")
        self.widget_id = widget_id
        self.capability = capability


class UnknownCommandError(AIControlError):
    """The command kind is not part of the command taxonomy."""

    def __init__(self, command: str):
        super().__init__(f"unrecognized command kind: {command}")
        self.command = command


class MissingParameterError(AIControlError):
    """A required command parameter is absent or empty."""

    def __init__(self, command: str, param: str):
        super().__init__(f"command {command} requires params.{param}")
        self.command = command
        self.param = param


class MissingCredentialsError(AIControlError):
    """No API key could be found in the environment or process properties."""

    def __init__(self) -> None:
        super().__init__("QWEN_API_KEY environment variable not found")
