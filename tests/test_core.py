from __future__ import annotations

import importlib.util
import json
from pathlib import Path
from types import ModuleType

import pytest

from floatrange.config import Settings
from floatrange.core import load_previous_pins, resolve_manifest

SCRIPT = Path(__file__).resolve().parents[1] / "scripts" / "resolve.py"


def _load_cli() -> ModuleType:
    spec = importlib.util.spec_from_file_location("resolve_cli", SCRIPT)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def project(tmp_path: Path) -> dict[str, Path]:
    manifest = tmp_path / "deps.json"
    manifest.write_text(
        json.dumps(
            {
                "dependencies": {"Alpha": "1.1.*", "Beta": "2.0.0-rc*"},
                "devDependencies": {"Gamma": "*"},
            }
        ),
        encoding="utf-8",
    )
    listing = tmp_path / "listing.yaml"
    listing.write_text(
        "Alpha: ['1.0.0', '1.1.0', '1.1.0-beta', '1.2.0']\n"
        "Beta: ['2.0.0-beta.1', '2.0.0-rc.1', '2.0.0-rc.2']\n"
        "Gamma: ['0.1.0', '0.2.0-alpha']\n",
        encoding="utf-8",
    )
    previous = tmp_path / "pins.json"
    previous.write_text(json.dumps({"Alpha": "1.0.0", "Delta": "4.0.0"}), encoding="utf-8")
    return {"manifest": manifest, "listing": listing, "previous": previous}


def test_resolve_manifest(project: dict[str, Path]) -> None:
    report = resolve_manifest(project["manifest"], project["listing"])

    assert report["version"] == "1"
    assert report["hasUnresolved"] is False
    assert report["totals"] == {"dependencies": 3, "resolved": 3, "unresolved": 0}
    resolved = {entry["name"]: entry["resolved"] for entry in report["dependencies"]}
    assert resolved == {"Alpha": "1.1.0", "Beta": "2.0.0-rc.2", "Gamma": "0.1.0"}
    assert "preview" not in report


def test_resolve_manifest_with_preview(project: dict[str, Path]) -> None:
    report = resolve_manifest(
        project["manifest"], project["listing"], settings=Settings(), previous=project["previous"]
    )
    preview = report["preview"]
    assert preview["updated"] == [{"name": "Alpha", "from": "1.0.0", "to": "1.1.0"}]
    assert [pin["name"] for pin in preview["added"]] == ["Beta", "Gamma"]
    assert preview["removed"] == [{"name": "Delta", "version": "4.0.0"}]
    assert preview["changeSummary"]["status"] == "updated"


def test_load_previous_pins_rejects_bad_shape(tmp_path: Path) -> None:
    path = tmp_path / "pins.json"
    path.write_text(json.dumps({"Alpha": 1}), encoding="utf-8")
    with pytest.raises(ValueError):
        load_previous_pins(path)


def test_cli_success(project: dict[str, Path], capsys: pytest.CaptureFixture[str]) -> None:
    cli = _load_cli()
    code = cli.main(["--manifest", str(project["manifest"]), "--listing", str(project["listing"])])
    assert code == 0
    assert json.loads(capsys.readouterr().out)["hasUnresolved"] is False


def test_cli_unresolved_exit_code(
    project: dict[str, Path], monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.delenv("FLOATRANGE_ALLOW_UNRESOLVED", raising=False)
    project["manifest"].write_text(
        json.dumps({"dependencies": {"Alpha": "9.*"}}), encoding="utf-8"
    )
    args = ["--manifest", str(project["manifest"]), "--listing", str(project["listing"])]
    cli = _load_cli()

    assert cli.main(args) == 10
    assert cli.main([*args, "--allow-unresolved"]) == 0

    monkeypatch.setenv("FLOATRANGE_ALLOW_UNRESOLVED", "true")
    assert cli.main(args) == 0
    capsys.readouterr()


def test_cli_input_errors(
    project: dict[str, Path], tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cli = _load_cli()
    args = ["--manifest", str(project["manifest"]), "--listing", str(project["listing"])]

    assert cli.main([*args, "--settings", str(tmp_path / "missing.json")]) == 1
    assert "Settings file not found" in capsys.readouterr().err

    bad_listing = tmp_path / "bad.json"
    bad_listing.write_text(json.dumps({"Alpha": "1.0.0"}), encoding="utf-8")
    assert cli.main(["--manifest", str(project["manifest"]), "--listing", str(bad_listing)]) == 1
    assert "invalid listing" in capsys.readouterr().err


def test_resolve_manifest_exact_pin(tmp_path: Path) -> None:
    manifest = tmp_path / "deps.json"
    manifest.write_text(json.dumps({"dependencies": {"Foo": "1.0.0"}}), encoding="utf-8")
    listing = tmp_path / "listing.json"
    listing.write_text(json.dumps({"Foo": ["1.0.0", "1.0.1"]}), encoding="utf-8")

    report = resolve_manifest(manifest, listing)

    assert report["hasUnresolved"] is False
    assert report["dependencies"][0]["resolved"] == "1.0.0"
    assert report["dependencies"][0]["range"] == "1.0.0"
