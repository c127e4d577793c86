"""Command envelope and taxonomy."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..conversation.models import StatusLevel
from ..errors import UnknownCommandError


class CommandKind(str, Enum):
    """Command kinds the dispatcher knows how to execute."""

    SHOW_COMPONENT = "showComponent"
    HIDE_COMPONENT = "hideComponent"
    CHANGE_TEXT = "changeText"
    CHANGE_COLOR = "changeColor"
    SET_COLOR_PICKER = "setColorPicker"
    SET_STYLE = "setStyle"
    SHOW_COLOR_HISTORY = "showColorHistory"
    CLEAR_COLOR_HISTORY = "clearColorHistory"
    APPLY_HISTORY_COLOR = "applyHistoryColor"

    @classmethod
    def from_name(cls, name: str) -> "CommandKind":
        """Resolve a command name case-insensitively.

        Raises:
            UnknownCommandError: If the name is not a known kind
        """
        wanted = (name or "").strip().lower()
        for kind in cls:
            if kind.value.lower() == wanted:
                return kind
        raise UnknownCommandError(name)


class CommandEnvelope(BaseModel):
    """A structured command produced by the model.

    Attributes:
        command: Command kind as sent by the model (matched case-insensitively)
        target: Identifier of the widget the command acts on
        params: Command-specific parameters
        description: Human-readable prose shown to the user verbatim
    """

    model_config = ConfigDict(frozen=True)

    command: str
    target: str = ""
    params: dict[str, Any] = Field(default_factory=dict)
    description: str = ""

    @field_validator("target", "description", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        if value is None:
            return ""
        if isinstance(value, (int, float)):
            return str(value)
        return value

    @field_validator("params", mode="before")
    @classmethod
    def _none_as_no_params(cls, value: Any) -> Any:
        return {} if value is None else value


class DispatchStatus(str, Enum):
    """Terminal outcome of a single dispatch."""

    SUCCESS = "success"
    FAILED = "failed"
    ERROR = "error"

    @property
    def level(self) -> StatusLevel:
        return {
            DispatchStatus.SUCCESS: StatusLevel.GREEN,
            DispatchStatus.FAILED: StatusLevel.ORANGE,
            DispatchStatus.ERROR: StatusLevel.RED,
        }[self]

    @property
    def label(self) -> str:
        return {
            DispatchStatus.SUCCESS: "command succeeded",
            DispatchStatus.FAILED: "execution failed",
            DispatchStatus.ERROR: "execution error",
        }[self]
