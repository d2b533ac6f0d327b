"""Definitions for tools, resources and resource templates."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Mapping

from pydantic import BaseModel

from .core.uri_template import UriTemplate, Variables
from .schemas import ToolResponse

RESOURCE_MIME_TYPE = "application/json"


@dataclass(slots=True)
class ResourceResult:
    """Resource read payload: raw JSON contents plus the structured value."""

    contents: list[dict[str, str]]
    structured_content: Any

    def to_dict(self) -> dict[str, Any]:
        return {"contents": self.contents, "structuredContent": self.structured_content}


@dataclass(frozen=True, slots=True)
class ToolDefinition:
    name: str
    title: str
    description: str
    input_model: type[BaseModel]
    handler: Callable[[Any], ToolResponse]
    failure_code: str = "TOOL_ERROR"

    def describe(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "title": self.title,
            "description": self.description,
            "inputSchema": self.input_model.model_json_schema(by_alias=True),
            "outputSchema": ToolResponse.model_json_schema(),
        }


@dataclass(frozen=True, slots=True)
class ResourceDefinition:
    name: str
    uri: str
    title: str
    description: str
    handler: Callable[[str], ResourceResult]

    def describe(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "uri": self.uri,
            "title": self.title,
            "description": self.description,
            "mimeType": RESOURCE_MIME_TYPE,
        }


@dataclass(frozen=True, slots=True)
class ResourceTemplateDefinition:
    """Parametrised resource.

    ``completers`` maps a template variable to a callable producing the
    current candidate values for that variable. ``lister`` yields the variable
    sets of every concrete resource the template currently addresses.
    """

    name: str
    template: UriTemplate
    title: str
    description: str
    handler: Callable[[str, Variables], ResourceResult]
    completers: Mapping[str, Callable[[], Iterable[Any]]] = field(default_factory=dict)
    lister: Callable[[], Iterable[Mapping[str, Any]]] | None = None

    def describe(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "uriTemplate": self.template.pattern,
            "title": self.title,
            "description": self.description,
            "mimeType": RESOURCE_MIME_TYPE,
        }


def format_resource(uri: str, payload: Any) -> ResourceResult:
    return ResourceResult(
        contents=[
            {
                "uri": uri,
                "mimeType": RESOURCE_MIME_TYPE,
                "text": json.dumps(payload, ensure_ascii=False),
            }
        ],
        structured_content=payload,
    )


def format_empty_resource() -> ResourceResult:
    return ResourceResult(contents=[], structured_content={"items": []})


__all__ = [
    "RESOURCE_MIME_TYPE",
    "ResourceDefinition",
    "ResourceResult",
    "ResourceTemplateDefinition",
    "ToolDefinition",
    "format_empty_resource",
    "format_resource",
]
