"""Portal server: tool and resource registration and dispatch."""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Mapping

import structlog
from pydantic import ValidationError

from .core.matching import RandomMatcher
from .core.store import EntityStore
from .handlers import PortalHandlers
from .registry import (
    RESOURCE_MIME_TYPE,
    ResourceDefinition,
    ResourceResult,
    ResourceTemplateDefinition,
    ToolDefinition,
)
from .resources import build_resource_templates, build_resources
from .schemas import ToolResponse, make_error
from .tools import build_tools
from . import __version__


class ResourceNotFoundError(KeyError):
    """Raised when no registered resource or template addresses a URI."""

    def __init__(self, uri: str):
        super().__init__(uri)
        self.uri = uri

    def __str__(self) -> str:
        return f"Resource not found: {self.uri}"


class PortalServer:
    """Registry of tools and resources with envelope-producing dispatch."""

    name = "job-portal-server"

    def __init__(
        self,
        *,
        tools: Iterable[ToolDefinition] = (),
        resources: Iterable[ResourceDefinition] = (),
        templates: Iterable[ResourceTemplateDefinition] = (),
    ) -> None:
        self._tools: dict[str, ToolDefinition] = {}
        self._resources: dict[str, ResourceDefinition] = {}
        self._templates: dict[str, ResourceTemplateDefinition] = {}
        self._logger = structlog.get_logger(__name__)
        for tool in tools:
            self.register_tool(tool)
        for resource in resources:
            self.register_resource(resource)
        for template in templates:
            self.register_template(template)

    @property
    def version(self) -> str:
        return __version__

    def register_tool(self, tool: ToolDefinition) -> None:
        if tool.name in self._tools:
            raise ValueError(f"Tool already registered: {tool.name!r}")
        self._tools[tool.name] = tool

    def register_resource(self, resource: ResourceDefinition) -> None:
        if resource.uri in self._resources:
            raise ValueError(f"Resource already registered: {resource.uri!r}")
        self._resources[resource.uri] = resource

    def register_template(self, template: ResourceTemplateDefinition) -> None:
        if template.name in self._templates:
            raise ValueError(f"Resource template already registered: {template.name!r}")
        unknown = set(template.completers) - set(template.template.variable_names)
        if unknown:
            raise ValueError(
                f"Completers for unknown variables in {template.name!r}: {sorted(unknown)}"
            )
        self._templates[template.name] = template

    def list_tools(self) -> list[dict[str, Any]]:
        return [tool.describe() for tool in self._tools.values()]

    def list_resources(self) -> list[dict[str, Any]]:
        """Describe static resources plus every concrete templated resource."""
        described = [resource.describe() for resource in self._resources.values()]
        for definition in self._templates.values():
            if definition.lister is None:
                continue
            for variables in definition.lister():
                described.append(
                    {
                        "name": definition.name,
                        "uri": definition.template.expand(variables),
                        "title": definition.title,
                        "mimeType": RESOURCE_MIME_TYPE,
                    }
                )
        return described

    def list_resource_templates(self) -> list[dict[str, Any]]:
        return [template.describe() for template in self._templates.values()]

    def call_tool(self, name: str, arguments: Mapping[str, Any] | None = None) -> ToolResponse:
        tool = self._tools.get(name)
        if tool is None:
            return make_error("UNKNOWN_TOOL", f"Unknown tool: {name}")

        try:
            params = tool.input_model.model_validate(dict(arguments or {}))
        except ValidationError as exc:
            self._logger.info("tool.invalid_input", tool=name, errors=exc.error_count())
            return make_error(
                "INVALID_INPUT",
                f"Invalid arguments for {name}",
                exc.errors(include_url=False, include_context=False),
            )

        try:
            response = tool.handler(params)
        except Exception as exc:  # noqa: BLE001
            self._logger.exception("tool.failed", tool=name)
            return make_error(tool.failure_code, f"Tool {name} failed", str(exc))

        self._logger.info("tool.called", tool=name, success=response.success)
        return response

    def read_resource(self, uri: str) -> ResourceResult:
        """Resolve ``uri`` against static resources, then templates in order."""
        resource = self._resources.get(uri)
        if resource is not None:
            return resource.handler(uri)

        for definition in self._templates.values():
            variables = definition.template.match(uri)
            if variables is None:
                continue
            self._logger.debug("resource.matched", template=definition.name, uri=uri)
            return definition.handler(uri, variables)

        self._logger.info("resource.not_found", uri=uri)
        raise ResourceNotFoundError(uri)

    def complete(self, template_name: str, variable: str, partial: str) -> Iterator[str]:
        """Lazily yield completion candidates for one template variable."""
        definition = self._templates.get(template_name)
        if definition is None:
            raise ResourceNotFoundError(template_name)
        source = definition.completers.get(variable)
        if source is None:
            return iter(())
        return definition.template.complete(variable, partial, source())


def build_server(*, store: EntityStore, matcher: RandomMatcher | None = None) -> PortalServer:
    """Wire handlers, tools and resources for ``store`` into a server."""
    handlers = PortalHandlers(store=store, matcher=matcher)
    return PortalServer(
        tools=build_tools(handlers),
        resources=build_resources(store),
        templates=build_resource_templates(store),
    )


__all__ = ["PortalServer", "ResourceNotFoundError", "build_server"]
