"""Function schemas and assistant tool definitions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from aiwire.schema import Model, wire_field


def _skip():
    return wire_field(omit_if_none=True, default=None)


class JSONSchemaType(str, Enum):
    OBJECT = "object"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    NULL = "null"
    BOOLEAN = "boolean"


@dataclass
class JSONSchemaDefine(Model):
    """A JSON schema node describing one value."""

    schema_type: JSONSchemaType | None = wire_field(rename="type", default=None)
    description: str | None = _skip()
    enum_values: list[str] | None = _skip()
    properties: dict[str, JSONSchemaDefine] | None = _skip()
    required: list[str] | None = _skip()
    items: JSONSchemaDefine | None = _skip()


@dataclass
class FunctionParameters(Model):
    """The parameter schema of a callable function."""

    schema_type: JSONSchemaType = wire_field(rename="type")
    properties: dict[str, JSONSchemaDefine] | None = _skip()
    required: list[str] | None = _skip()


@dataclass
class Function(Model):
    """A function the model may call."""

    name: str
    parameters: FunctionParameters
    description: str | None = _skip()


class FileSearchRanker(str, Enum):
    AUTO = "auto"
    DEFAULT_2024_08_21 = "default_2024_08_21"


@dataclass
class FileSearchRankingOptions(Model):
    ranker: FileSearchRanker | None = None
    score_threshold: float | None = None


@dataclass
class ToolsFileSearchObject(Model):
    max_num_results: int | None = None
    ranking_options: FileSearchRankingOptions | None = None

    def __post_init__(self) -> None:
        if self.max_num_results is not None and not 0 <= self.max_num_results <= 255:
            raise ValueError("max_num_results must be between 0 and 255")


@dataclass
class CodeInterpreterTool(Model):
    """The code interpreter tool."""

    _wire_tag = "code_interpreter"


@dataclass
class ToolsFileSearch(Model):
    """The file search tool."""

    _wire_tag = "file_search"
    file_search: ToolsFileSearchObject | None = _skip()


@dataclass
class ToolsFunction(Model):
    """A function tool."""

    _wire_tag = "function"
    function: Function


Tools = CodeInterpreterTool | ToolsFileSearch | ToolsFunction

_TOOL_CLASSES = {
    cls._wire_tag: cls for cls in (CodeInterpreterTool, ToolsFileSearch, ToolsFunction)
}


def parse_tool(data):
    """Decode a tool object by its ``type`` tag."""
    if not isinstance(data, dict):
        raise ValueError("a tool must be a JSON object")
    tag = data.get("type")
    try:
        cls = _TOOL_CLASSES[tag]
    except (KeyError, TypeError):
        raise ValueError(f"unknown tool type {tag!r}") from None
    return cls.from_dict(data)