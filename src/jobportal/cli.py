"""Typer CLI entrypoint for the job portal."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from pydantic import ValidationError

from .container import PortalContainer, create_container
from .logging import configure_logging
from .pipeline import AuditLogger
from .schemas.config import load_config
from .server import ResourceNotFoundError

app = typer.Typer(help="In-memory job portal: tools, resources and completions.")


def _config_option() -> Any:
    return typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path.")


def _log_level_option() -> Any:
    return typer.Option("INFO", help="Log level for structured logging.")


def _build_container(config: Optional[Path], log_level: str) -> PortalContainer:
    settings: dict[str, Any] = {}
    if config:
        with config.open("r", encoding="utf-8") as handle:
            loaded = yaml.safe_load(handle) or {}
        try:
            settings = load_config(loaded).to_settings()
        except ValidationError as exc:
            raise typer.BadParameter(str(exc), param_hint="--config") from exc

    configure_logging(log_level)
    return create_container(settings=settings)


def _emit(payload: Any) -> None:
    typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))


@app.command()
def tools(
    config: Optional[Path] = _config_option(),
    log_level: str = _log_level_option(),
) -> None:
    """List registered tools with their input schemas."""
    server = _build_container(config, log_level).server()
    _emit(server.list_tools())


@app.command()
def resources(
    config: Optional[Path] = _config_option(),
    log_level: str = _log_level_option(),
) -> None:
    """List resources and resource templates."""
    server = _build_container(config, log_level).server()
    _emit({"resources": server.list_resources(), "templates": server.list_resource_templates()})


@app.command()
def call(
    name: str = typer.Argument(..., help="Tool name."),
    args: str = typer.Option("{}", "--args", help="Tool arguments as a JSON object."),
    config: Optional[Path] = _config_option(),
    log_level: str = _log_level_option(),
) -> None:
    """Invoke a tool and print its response envelope."""
    try:
        arguments = json.loads(args)
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"Invalid JSON: {exc}", param_hint="--args") from exc
    if not isinstance(arguments, dict):
        raise typer.BadParameter("Arguments must be a JSON object", param_hint="--args")

    server = _build_container(config, log_level).server()
    response = server.call_tool(name, arguments)
    _emit(response.model_dump())
    if not response.success:
        raise typer.Exit(code=1)


@app.command()
def read(
    uri: str = typer.Argument(..., help="Resource URI, e.g. profile://1."),
    config: Optional[Path] = _config_option(),
    log_level: str = _log_level_option(),
) -> None:
    """Read a resource by URI."""
    server = _build_container(config, log_level).server()
    try:
        result = server.read_resource(uri)
    except ResourceNotFoundError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    _emit(result.to_dict())


@app.command()
def complete(
    template: str = typer.Argument(..., help="Resource template name, e.g. profile."),
    variable: str = typer.Argument(..., help="Template variable to complete."),
    partial: str = typer.Argument("", help="Value typed so far."),
    config: Optional[Path] = _config_option(),
    log_level: str = _log_level_option(),
) -> None:
    """Suggest values for a partially typed template variable."""
    server = _build_container(config, log_level).server()
    try:
        values = list(server.complete(template, variable, partial))
    except ResourceNotFoundError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    _emit(values)


@app.command()
def run(
    requests: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Requests JSONL path."),
    output: Path = typer.Option(
        ...,
        exists=False,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        help="Output JSON path.",
    ),
    audit_log: Optional[Path] = typer.Option(None, dir_okay=False, help="Audit log output (JSONL)."),
    config: Optional[Path] = _config_option(),
    log_level: str = _log_level_option(),
) -> None:
    """Execute a JSONL batch of requests against one in-memory store."""
    container = _build_container(config, log_level)
    runner = container.batch_runner()
    audit_logger = AuditLogger(audit_log) if audit_log else None

    results = runner.run(requests_path=requests, output_path=output, audit_logger=audit_logger)
    typer.echo(f"Processed {len(results)} requests. Results saved to {output}.")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
