from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

FragmentKind = Literal["valid", "invalid", "incomplete"]
NodeType = Literal["object", "array", "string", "number", "boolean", "null", "undefined"]


class Boundary(BaseModel):
    model_config = ConfigDict(frozen=True)

    end_offset: int
    complete: bool


class Fragment(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    start_offset: int
    end_offset: int
    complete: bool


class ExtractedJson(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: FragmentKind
    text: str
    start_offset: int = 0
    end_offset: int = 0
    parsed_value: Any = None
    diagnostic: str | None = None


class ParsedProperty(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    value: ParsedNode
    is_key_error: bool = False


class ParsedNode(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: NodeType
    value: Any = None
    children: list[ParsedProperty] = Field(default_factory=list)
    items: list[ParsedNode] = Field(default_factory=list)
    is_error: bool = False

    def has_errors(self) -> bool:
        if self.is_error:
            return True
        for prop in self.children:
            if prop.is_key_error or prop.value.has_errors():
                return True
        return any(item.has_errors() for item in self.items)


class InspectedFragment(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: FragmentKind
    text: str
    tree: ParsedNode
    diagnostic: str | None = None
    start_offset: int = 0
    end_offset: int = 0


class InspectionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    source: str
    fragments: list[InspectedFragment] = Field(default_factory=list)
    metadata: dict[str, Any] = Field(default_factory=dict)


ParsedProperty.model_rebuild()
ParsedNode.model_rebuild()
