"""Batch execution of portal requests from JSONL files."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pendulum
import structlog

from .server import PortalServer, ResourceNotFoundError
from . import __version__


@dataclass(slots=True)
class PortalRequest:
    """One parsed request line."""

    line: int
    kind: str
    payload: dict[str, Any] = field(default_factory=dict)


class RequestLoadError(ValueError):
    """Raised when a request file contains invalid lines."""

    def __init__(self, errors: list[str], partial: list[PortalRequest]):
        super().__init__("Request loading failed")
        self.errors = errors
        self.partial = partial

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Request loading failed: {self.errors}"


class RequestLoader:
    """Parse request JSONL: one of ``tool``, ``resource`` or ``complete`` per line."""

    def load(self, path: Path) -> list[PortalRequest]:
        requests: list[PortalRequest] = []
        errors: list[str] = []
        with path.open("r", encoding="utf-8") as handle:
            for idx, line in enumerate(handle, start=1):
                raw = line.strip()
                if not raw:
                    continue
                try:
                    record = json.loads(raw)
                except json.JSONDecodeError as exc:
                    errors.append(f"line {idx}: invalid JSON ({exc})")
                    continue
                if not isinstance(record, dict):
                    errors.append(f"line {idx}: request must be an object")
                    continue
                try:
                    requests.append(self._parse(idx, record))
                except ValueError as exc:
                    errors.append(f"line {idx}: {exc}")
        if errors:
            raise RequestLoadError(errors, requests)
        return requests

    @staticmethod
    def _parse(idx: int, record: dict[str, Any]) -> PortalRequest:
        if "tool" in record:
            arguments = record.get("arguments") or {}
            if not isinstance(arguments, dict):
                raise ValueError("arguments must be an object")
            return PortalRequest(idx, "tool", {"name": str(record["tool"]), "arguments": arguments})
        if "resource" in record:
            return PortalRequest(idx, "resource", {"uri": str(record["resource"])})
        if "complete" in record:
            completion = record["complete"]
            if not isinstance(completion, dict) or not {"template", "variable"} <= completion.keys():
                raise ValueError("complete requires template and variable")
            return PortalRequest(
                idx,
                "complete",
                {
                    "template": str(completion["template"]),
                    "variable": str(completion["variable"]),
                    "partial": str(completion.get("partial", "")),
                },
            )
        raise ValueError("missing tool, resource or complete field")


class OutputWriter:
    """Persist batch outcomes."""

    def write(self, path: Path, payload: dict | list[dict]) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )


class AuditLogger:
    """Append-only audit logger writing JSON lines."""

    def __init__(self, path: Path):
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def append(self, record: dict) -> None:
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(record, ensure_ascii=False))
            handle.write("\n")


class BatchRunner:
    """Execute requests sequentially against one server."""

    def __init__(
        self,
        *,
        server: PortalServer,
        loader: RequestLoader | None = None,
        writer: OutputWriter | None = None,
    ) -> None:
        self._server = server
        self._loader = loader or RequestLoader()
        self._writer = writer or OutputWriter()
        self._logger = structlog.get_logger(__name__)

    def execute(self, request: PortalRequest) -> dict[str, Any]:
        """Run one request and return its serialisable result entry."""
        payload = request.payload
        if request.kind == "tool":
            response = self._server.call_tool(payload["name"], payload["arguments"])
            return {"line": request.line, "tool": payload["name"], "response": response.model_dump()}
        if request.kind == "resource":
            try:
                result = self._server.read_resource(payload["uri"])
            except ResourceNotFoundError as exc:
                return {
                    "line": request.line,
                    "resource": payload["uri"],
                    "error": {"code": "RESOURCE_NOT_FOUND", "message": str(exc)},
                }
            return {"line": request.line, "resource": payload["uri"], "result": result.to_dict()}
        try:
            values = list(
                self._server.complete(payload["template"], payload["variable"], payload["partial"])
            )
        except ResourceNotFoundError as exc:
            return {
                "line": request.line,
                "complete": payload,
                "error": {"code": "RESOURCE_NOT_FOUND", "message": str(exc)},
            }
        return {"line": request.line, "complete": payload, "values": values}

    def run(
        self,
        *,
        requests_path: Path,
        output_path: Path,
        audit_logger: AuditLogger | None = None,
    ) -> list[dict[str, Any]]:
        load_errors: list[str] = []
        try:
            requests = self._loader.load(requests_path)
        except RequestLoadError as exc:
            requests = exc.partial
            load_errors.extend(exc.errors)
            self._logger.warning("requests.partial_load", errors=exc.errors)

        results: list[dict[str, Any]] = []
        for request in requests:
            entry = self.execute(request)
            results.append(entry)
            if audit_logger:
                audit_logger.append(
                    {
                        "line": request.line,
                        "kind": request.kind,
                        "request": request.payload,
                        "ok": _succeeded(entry),
                        "timestamp": pendulum.now("UTC").to_iso8601_string(),
                    }
                )
            self._logger.info("batch.request", line=request.line, kind=request.kind, ok=_succeeded(entry))

        metadata = {
            "request_count": len(requests),
            "errors": load_errors,
            "timestamp": pendulum.now().to_iso8601_string(),
            "app_version": __version__,
        }
        self._writer.write(output_path, {"metadata": metadata, "results": results})
        return results


def _succeeded(entry: dict[str, Any]) -> bool:
    if "error" in entry:
        return False
    response = entry.get("response")
    return bool(response["success"]) if response is not None else True


__all__ = [
    "AuditLogger",
    "BatchRunner",
    "OutputWriter",
    "PortalRequest",
    "RequestLoadError",
    "RequestLoader",
]
