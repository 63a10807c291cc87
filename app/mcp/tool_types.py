from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

ParamType = Literal["string", "number", "boolean", "object", "array"]

# declared parameter type -> accepted python types
PYTHON_TYPES: Dict[str, Tuple[Type[Any], ...]] = {
    "string": (str,),
    "number": (int, float),
    "boolean": (bool,),
    "object": (dict,),
    "array": (list,),
}


class WireModel(BaseModel):
    """camelCase on the wire, snake_case in python."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ToolParameter(WireModel):
    name: str
    type: ParamType
    description: str = ""
    required: bool = False
    default: Optional[Any] = None

    def accepts(self, value: Any) -> bool:
        # bool is an int subclass; only "boolean" may take it
        if isinstance(value, bool):
            return self.type == "boolean"
        return isinstance(value, PYTHON_TYPES[self.type])


class ToolDefinition(WireModel):
    name: str
    description: str
    parameters: List[ToolParameter] = Field(default_factory=list)


DEFAULT_TOOLS: Tuple[ToolDefinition, ...] = (
    ToolDefinition(
        name="default_tool",
        description="Default mock tool",
        parameters=[
            ToolParameter(
                name="input",
                type="string",
                description="Input parameter",
                required=True,
            ),
        ],
    ),
)
