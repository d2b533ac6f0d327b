from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from jobportal.cli import app
from jobportal.container import create_container
from jobportal.pipeline import AuditLogger, RequestLoadError, RequestLoader


def write_requests(path: Path, lines: list[object]) -> None:
    path.write_text(
        "\n".join(line if isinstance(line, str) else json.dumps(line) for line in lines),
        encoding="utf-8",
    )


def test_batch_runner_applies_requests_in_order(tmp_path: Path) -> None:
    requests_path = tmp_path / "requests.jsonl"
    output_path = tmp_path / "out" / "results.json"
    audit_path = tmp_path / "audit.jsonl"
    write_requests(
        requests_path,
        [
            {"tool": "delete_profile", "arguments": {"id": 3}},
            {
                "tool": "create_profile",
                "arguments": {
                    "name": "Asha Rao",
                    "email": "asha.rao@gmail.com",
                    "phone": "9123456780",
                    "skills": ["Go"],
                },
            },
            {"resource": "profile://3"},
            {"resource": "missing://1"},
            {"complete": {"template": "profile", "variable": "id", "partial": "3"}},
        ],
    )

    runner = create_container().batch_runner()
    results = runner.run(
        requests_path=requests_path,
        output_path=output_path,
        audit_logger=AuditLogger(audit_path),
    )

    assert results[0]["response"]["success"] is True
    assert results[1]["response"]["data"]["id"] == 3
    assert results[2]["result"]["structuredContent"]["name"] == "Asha Rao"
    assert results[3]["error"]["code"] == "RESOURCE_NOT_FOUND"
    assert results[4]["values"] == ["3"]

    rendered = json.loads(output_path.read_text(encoding="utf-8"))
    assert rendered["metadata"]["request_count"] == 5
    assert rendered["metadata"]["errors"] == []
    assert rendered["results"] == results

    audit_lines = audit_path.read_text(encoding="utf-8").strip().splitlines()
    assert len(audit_lines) == 5
    assert json.loads(audit_lines[3])["ok"] is False


def test_request_loader_reports_bad_lines(tmp_path: Path) -> None:
    requests_path = tmp_path / "requests.jsonl"
    write_requests(
        requests_path,
        [
            {"resource": "list://jobs"},
            "{invalid",
            {"unknown": True},
            {"complete": {"template": "profile"}},
            {"tool": "create_job", "arguments": [1]},
        ],
    )

    with pytest.raises(RequestLoadError) as excinfo:
        RequestLoader().load(requests_path)
    error = excinfo.value

    assert len(error.partial) == 1
    assert "invalid JSON" in error.errors[0]
    assert error.errors[1].startswith("line 3")
    assert len(error.errors) == 4


def test_cli_run_writes_output_with_partial_errors(tmp_path: Path) -> None:
    requests_path = tmp_path / "requests.jsonl"
    output_path = tmp_path / "results.json"
    write_requests(
        requests_path,
        [{"tool": "filter_jobs", "arguments": {"skillsRequired": "react"}}, "not json"],
    )

    result = CliRunner().invoke(
        app,
        [
            "run",
            "--requests",
            str(requests_path),
            "--output",
            str(output_path),
            "--log-level",
            "ERROR",
        ],
    )

    assert result.exit_code == 0, result.stdout
    rendered = json.loads(output_path.read_text(encoding="utf-8"))
    assert rendered["metadata"]["request_count"] == 1
    assert len(rendered["metadata"]["errors"]) == 1
    assert rendered["results"][0]["response"]["data"]["count"] == 1
