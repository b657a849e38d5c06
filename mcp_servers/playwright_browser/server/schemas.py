"""
Argument models for every tool.

The models validate raw `tools/call` arguments, fill in defaults, and expose
engine-ready keyword options. Wire names are camelCase (as advertised in
definitions.py); after validation the option objects dump to Playwright's
snake_case keyword arguments.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union
from urllib.parse import urlsplit

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr, field_validator
from pydantic import ValidationError as PydanticValidationError

from ..errors import ValidationError

Number = Union[StrictInt, StrictFloat]
WaitUntil = Literal["load", "domcontentloaded", "networkidle", "commit"]

# Schemes that carry no authority part but are still navigable.
_OPAQUE_SCHEMES = {"about", "data", "file", "blob"}


class ToolArguments(BaseModel):
    """Base for top-level tool arguments; unknown keys are dropped."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class EngineOptions(ToolArguments):
    """Options object forwarded to a single Playwright call."""

    def to_kwargs(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


# ═══════════════════════════════════════════════════════════════════════════════
# OPTION OBJECTS
# ═══════════════════════════════════════════════════════════════════════════════


class Position(EngineOptions):
    x: Number
    y: Number


class Clip(EngineOptions):
    x: Number
    y: Number
    width: Number
    height: Number


class NavigateOptions(EngineOptions):
    timeout: Number | None = None
    wait_until: WaitUntil | None = Field(default=None, alias="waitUntil")
    referer: StrictStr | None = None


class ClickOptions(EngineOptions):
    button: Literal["left", "right", "middle"] | None = None
    click_count: StrictInt | None = Field(default=None, alias="clickCount")
    delay: Number | None = None
    position: Position | None = None
    modifiers: list[Literal["Alt", "Control", "Meta", "Shift"]] | None = None
    force: StrictBool | None = None
    no_wait_after: StrictBool | None = Field(default=None, alias="noWaitAfter")
    trial: StrictBool | None = None
    timeout: Number | None = None


class KeyboardOptions(EngineOptions):
    delay: Number | None = None
    no_wait_after: StrictBool | None = Field(default=None, alias="noWaitAfter")
    timeout: Number | None = None


class ActionOptions(EngineOptions):
    force: StrictBool | None = None
    no_wait_after: StrictBool | None = Field(default=None, alias="noWaitAfter")
    timeout: Number | None = None


class WaitForSelectorOptions(EngineOptions):
    state: Literal["attached", "detached", "visible", "hidden"] | None = None
    timeout: Number | None = None


class ScreenshotOptions(EngineOptions):
    path: StrictStr | None = None
    type: Literal["png", "jpeg"] | None = None
    quality: Annotated[StrictInt, Field(ge=0, le=100)] | None = None
    full_page: StrictBool | None = Field(default=None, alias="fullPage")
    clip: Clip | None = None
    omit_background: StrictBool | None = Field(default=None, alias="omitBackground")


class ScrollOptions(EngineOptions):
    x: Number | None = None
    y: Number | None = None
    behavior: Literal["auto", "smooth"] | None = None


class TimeoutOptions(EngineOptions):
    timeout: Number | None = None


class HistoryOptions(EngineOptions):
    timeout: Number | None = None
    wait_until: WaitUntil | None = Field(default=None, alias="waitUntil")


# ═══════════════════════════════════════════════════════════════════════════════
# TOOL ARGUMENTS
# ═══════════════════════════════════════════════════════════════════════════════


class NavigateArgs(ToolArguments):
    url: StrictStr
    browser: Literal["chromium", "firefox", "webkit"] = "chromium"
    headless: StrictBool = True
    options: NavigateOptions = Field(default_factory=NavigateOptions)

    @field_validator("url")
    @classmethod
    def _absolute_url(cls, value: str) -> str:
        parts = urlsplit(value)
        if not parts.scheme or not (parts.netloc or parts.scheme.lower() in _OPAQUE_SCHEMES):
            raise ValueError("must be an absolute URL")
        return value


class ClickArgs(ToolArguments):
    selector: StrictStr
    options: ClickOptions = Field(default_factory=ClickOptions)


class TypeArgs(ToolArguments):
    selector: StrictStr
    text: StrictStr
    options: KeyboardOptions = Field(default_factory=KeyboardOptions)


class WaitForSelectorArgs(ToolArguments):
    selector: StrictStr
    options: WaitForSelectorOptions = Field(default_factory=WaitForSelectorOptions)


class GetTextArgs(ToolArguments):
    selector: StrictStr


class GetAttributeArgs(ToolArguments):
    selector: StrictStr
    attribute: StrictStr


class EvaluateArgs(ToolArguments):
    expression: StrictStr


class ScreenshotArgs(ToolArguments):
    options: ScreenshotOptions = Field(default_factory=ScreenshotOptions)


class FillArgs(ToolArguments):
    selector: StrictStr
    value: StrictStr
    options: ActionOptions = Field(default_factory=ActionOptions)


class SelectOptionArgs(ToolArguments):
    selector: StrictStr
    values: Union[StrictStr, list[StrictStr]]
    options: ActionOptions = Field(default_factory=ActionOptions)


class ScrollArgs(ToolArguments):
    selector: StrictStr | None = None
    options: ScrollOptions = Field(default_factory=ScrollOptions)


class PressKeyArgs(ToolArguments):
    selector: StrictStr
    key: StrictStr
    options: KeyboardOptions = Field(default_factory=KeyboardOptions)


class EmptyArgs(ToolArguments):
    pass


class WaitForLoadStateArgs(ToolArguments):
    state: Literal["load", "domcontentloaded", "networkidle"] = "load"
    options: TimeoutOptions = Field(default_factory=TimeoutOptions)


class HistoryArgs(ToolArguments):
    options: HistoryOptions = Field(default_factory=HistoryOptions)


ARGUMENT_MODELS: dict[str, type[ToolArguments]] = {
    "navigate": NavigateArgs,
    "click": ClickArgs,
    "type": TypeArgs,
    "wait_for_selector": WaitForSelectorArgs,
    "get_text": GetTextArgs,
    "get_attribute": GetAttributeArgs,
    "evaluate": EvaluateArgs,
    "screenshot": ScreenshotArgs,
    "fill": FillArgs,
    "select_option": SelectOptionArgs,
    "scroll": ScrollArgs,
    "press_key": PressKeyArgs,
    "get_page_info": EmptyArgs,
    "wait_for_load_state": WaitForLoadStateArgs,
    "go_back": HistoryArgs,
    "go_forward": HistoryArgs,
    "reload": HistoryArgs,
    "close_browser": EmptyArgs,
}


def _describe_first_error(exc: PydanticValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ())) or "arguments"
    return f"{loc}: {first.get('msg', 'invalid value')}"


def parse_arguments(tool: str, model: type[ToolArguments], raw: Any) -> ToolArguments:
    """Validate raw call arguments against `model`, applying defaults."""
    try:
        return model.model_validate({} if raw is None else raw)
    except PydanticValidationError as exc:
        raise ValidationError(f"Invalid arguments for {tool}: {_describe_first_error(exc)}") from exc


__all__ = [
    "ARGUMENT_MODELS",
    "EngineOptions",
    "ToolArguments",
    "parse_arguments",
]
