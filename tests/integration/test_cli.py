"""Integration tests for the sheetstock CLI.

These tests drive the Typer app end-to-end against a JSON inventory in a
temporary directory:
- init loads the starter stock once
- cut records cuts and a leftover, and rejections exit with code 1
- check, resolve, list and summary report the store contents
- validate checks configuration files
"""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from sheetstock.cli.main import app
from sheetstock.domain import MaterialKind
from sheetstock.infrastructure import JsonFileInventoryStore


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "inventory.json"


@pytest.fixture
def seeded(runner: CliRunner, store_path: Path) -> Path:
    result = runner.invoke(app, ["--store", str(store_path), "init"])
    assert result.exit_code == 0, result.output
    return store_path


def _first_id(store_path: Path, kind: MaterialKind) -> str:
    return JsonFileInventoryStore(store_path).list(kind)[0].id


class TestInit:
    def test_loads_starter_stock(self, runner: CliRunner, store_path: Path) -> None:
        result = runner.invoke(app, ["--store", str(store_path), "init"])

        assert result.exit_code == 0
        assert "Loaded 4 starter record(s)." in result.output
        data = json.loads(store_path.read_text(encoding="utf-8"))
        assert len(data["sheets"]) == 2
        assert len(data["scraps"]) == 2

    def test_refuses_non_empty_inventory(self, runner: CliRunner, seeded: Path) -> None:
        result = runner.invoke(app, ["--store", str(seeded), "init"])
        assert result.exit_code == 1
        assert len(JsonFileInventoryStore(seeded).list(MaterialKind.SHEET)) == 2


class TestCut:
    def test_cut_from_sheet(self, runner: CliRunner, seeded: Path) -> None:
        sheet_id = _first_id(seeded, MaterialKind.SHEET)

        result = runner.invoke(
            app, ["--store", str(seeded), "cut", "sheet", sheet_id, "--cut", "700x500"]
        )

        assert result.exit_code == 0, result.output
        assert "CUTS RECORDED" in result.output
        assert "Sheet units left: 9" in result.output

        store = JsonFileInventoryStore(seeded)
        assert store.get(MaterialKind.SHEET, sheet_id).quantity == 9
        (leftover,) = store.list(MaterialKind.LEFTOVER)
        assert leftover.cut_area == pytest.approx(0.35)

    def test_proportional_policy(self, runner: CliRunner, seeded: Path) -> None:
        sheet_id = _first_id(seeded, MaterialKind.SHEET)
        result = runner.invoke(
            app,
            [
                "--store", str(seeded),
                "cut", "sheet", sheet_id,
                "--cut", "1000x1000",
                "--policy", "proportional_shrink",
            ],
        )
        assert result.exit_code == 0, result.output
        assert "Leftover: 1825x2738mm" in result.output

    def test_manual_policy(self, runner: CliRunner, seeded: Path) -> None:
        scrap_id = _first_id(seeded, MaterialKind.SCRAP)
        result = runner.invoke(
            app,
            [
                "--store", str(seeded),
                "cut", "scrap", scrap_id,
                "--cut", "500x300",
                "-p", "manual",
                "--remnant", "500x500",
            ],
        )
        assert result.exit_code == 0, result.output
        assert f"Removed scrap {scrap_id}" in result.output
        assert JsonFileInventoryStore(seeded).list(MaterialKind.LEFTOVER)[0].height == 500

    def test_rejected_batch_writes_nothing(self, runner: CliRunner, seeded: Path) -> None:
        sheet_id = _first_id(seeded, MaterialKind.SHEET)
        result = runner.invoke(
            app,
            [
                "--store", str(seeded),
                "cut", "sheet", sheet_id,
                "--cut", "700x500",
                "--cut", "2500x500",
            ],
        )
        assert result.exit_code == 1
        assert "Rejected [exceeds_source] (cut #2)" in result.output
        assert JsonFileInventoryStore(seeded).list(MaterialKind.CUT) == []

    def test_malformed_cut(self, runner: CliRunner, seeded: Path) -> None:
        sheet_id = _first_id(seeded, MaterialKind.SHEET)
        result = runner.invoke(
            app, ["--store", str(seeded), "cut", "sheet", sheet_id, "--cut", "big"]
        )
        assert result.exit_code == 2

    def test_default_policy_from_config(
        self, runner: CliRunner, tmp_path: Path
    ) -> None:
        config_path = tmp_path / "sheetstock.json"
        config_path.write_text(
            json.dumps(
                {
                    "store": {"path": "stock.json"},
                    "cutting": {"default_policy": "proportional_shrink"},
                }
            )
        )
        assert runner.invoke(app, ["--config", str(config_path), "init"]).exit_code == 0
        sheet_id = _first_id(tmp_path / "stock.json", MaterialKind.SHEET)

        result = runner.invoke(
            app, ["--config", str(config_path), "cut", "sheet", sheet_id, "--cut", "1000x1000"]
        )
        assert result.exit_code == 0, result.output
        assert "Leftover: 1825x2738mm" in result.output


class TestReadCommands:
    def test_check(self, runner: CliRunner, seeded: Path) -> None:
        sheet_id = _first_id(seeded, MaterialKind.SHEET)
        result = runner.invoke(
            app,
            [
                "--store", str(seeded),
                "check", "sheet", sheet_id,
                "--cut", "700x500",
                "--cut", "0x500",
            ],
        )
        assert result.exit_code == 1
        assert "OK 700x500mm" in result.output
        assert "invalid_dimensions" in result.output

    def test_resolve(self, runner: CliRunner, seeded: Path) -> None:
        sheet_id = _first_id(seeded, MaterialKind.SHEET)
        result = runner.invoke(app, ["--store", str(seeded), "resolve", "sheet", sheet_id])
        assert result.exit_code == 0
        assert "Chapa Transparente (2000x3000mm)" in result.output

    def test_resolve_missing(self, runner: CliRunner, seeded: Path) -> None:
        result = runner.invoke(app, ["--store", str(seeded), "resolve", "leftover", "nope"])
        assert result.exit_code == 1
        assert "not_found" in result.output

    def test_list(self, runner: CliRunner, seeded: Path) -> None:
        result = runner.invoke(app, ["--store", str(seeded), "list", "scrap"])
        assert result.exit_code == 0
        assert "500x800" in result.output
        assert "2 record(s)" in result.output

    def test_list_empty(self, runner: CliRunner, seeded: Path) -> None:
        result = runner.invoke(app, ["--store", str(seeded), "list", "cut"])
        assert "No cut records." in result.output

    def test_summary(self, runner: CliRunner, seeded: Path) -> None:
        result = runner.invoke(app, ["--store", str(seeded), "summary"])
        assert result.exit_code == 0
        assert "INVENTORY SUMMARY" in result.output
        assert "Transparente" in result.output

    def test_corrupt_store(self, runner: CliRunner, store_path: Path) -> None:
        store_path.write_text("[", encoding="utf-8")
        result = runner.invoke(app, ["--store", str(store_path), "summary"])
        assert result.exit_code == 1
        assert "Invalid JSON" in result.output

    def test_leftover_cut_area_above_area(self, runner: CliRunner, store_path: Path) -> None:
        leftover = {
            "id": "lo",
            "width": 100,
            "height": 100,
            "thickness": 3,
            "color": "Azul",
            "created_at": "2024-05-01T12:00:00Z",
            "cut_area": 5.0,
        }
        store_path.write_text(json.dumps({"leftovers": [leftover]}), encoding="utf-8")
        result = runner.invoke(app, ["--store", str(store_path), "list", "leftover"])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "exceeds the piece area" in result.output


class TestValidateCommand:
    def test_valid_config(self, runner: CliRunner, tmp_path: Path) -> None:
        config_path = tmp_path / "sheetstock.json"
        config_path.write_text(json.dumps({"schema_version": "1.0"}))
        result = runner.invoke(app, ["validate", str(config_path)])
        assert result.exit_code == 0
        assert "Validation passed" in result.output

    def test_invalid_config(self, runner: CliRunner, tmp_path: Path) -> None:
        config_path = tmp_path / "sheetstock.json"
        config_path.write_text(json.dumps({"cutting": {"default_policy": "guess"}}))
        result = runner.invoke(app, ["validate", str(config_path)])
        assert result.exit_code == 1
        assert "Errors:" in result.output
        assert "cutting.default_policy" in result.output
        assert "Validation failed" in result.output

    def test_file_not_found(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(app, ["validate", str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "File not found" in result.output
