from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from airsync.domain.reconciliation import SyncResult
from airsync.ui import cli

if TYPE_CHECKING:
    from pathlib import Path


def _capture(monkeypatch: pytest.MonkeyPatch, name: str) -> dict[str, object]:
    captured: dict[str, object] = {}

    def fake(**kwargs: object) -> SyncResult:
        captured.update(kwargs)
        return SyncResult(created=1)

    monkeypatch.setattr(cli, name, fake)
    return captured


def test_outbound_shipments_reads_value_files(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    captured = _capture(monkeypatch, "sync_outbound_shipments")
    values = tmp_path / "sheet.json"
    values.write_text(json.dumps({"values": [["Timestamp", "Email Address"]]}))

    cli.main(["outbound-shipments", "--values", str(values)])

    sources = captured["sources"]
    assert isinstance(sources, cli.ValueRangeFiles)
    assert sources.paths == (values,)


def test_swag_stock_arguments(monkeypatch: pytest.MonkeyPatch) -> None:
    captured = _capture(monkeypatch, "record_swag_stock")

    cli.main(["swag-stock", "--item", "Hoodie", "--size", "L", "--stock", "12"])

    assert captured == {"item": "Hoodie", "size": "L", "current_stock": 12.0, "barcode": ""}


def test_inbound_shipments_uses_tracking_directory(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    captured = _capture(monkeypatch, "sync_inbound_shipments")

    cli.main(["-v", "inbound-shipments", "--tracking-dir", str(tmp_path)])

    lookup = captured["tracking_lookup"]
    assert isinstance(lookup, cli.TrackingStatusFiles)
    assert lookup.directory == tmp_path


def test_missing_values_file_exits_with_usage_error(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    _capture(monkeypatch, "sync_outbound_shipments")

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["outbound-shipments", "--values", str(tmp_path / "missing.json")])

    assert excinfo.value.code == 2


def test_negative_stock_exits_with_usage_error(monkeypatch: pytest.MonkeyPatch) -> None:
    _capture(monkeypatch, "record_swag_stock")

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["swag-stock", "--item", "Hoodie", "--size", "L", "--stock", "-1"])

    assert excinfo.value.code == 2


def test_sync_failure_exits_nonzero(monkeypatch: pytest.MonkeyPatch) -> None:
    def failing(**_: object) -> SyncResult:
        raise RuntimeError("listing failed")

    monkeypatch.setattr(cli, "sync_auth_logins", failing)

    with pytest.raises(SystemExit) as excinfo:
        cli.main(["auth-logins"])

    assert excinfo.value.code == 1


def test_github_push_reads_payload(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("GITHUB_PUSH_REPOSITORY", "rfd")
    payload = tmp_path / "push.json"
    payload.write_text(json.dumps({"ref": "refs/heads/main", "repository": {"name": "rfd"}}))

    cli.main(["github-push", "--payload", str(payload), "--event", "push"])
