"""Unit tests for the command line interface."""

from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from curprfc.__main__ import cli


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def config(config_file) -> str:
    """Pinned config: 1950-2025, no colors."""
    return str(config_file("[dates]\nmax_year = 2025\n\n[output]\ncolor = false\n"))


class TestCurpCommand:
    """Tests for the curp command."""

    def test_valid(self, runner: CliRunner, config: str) -> None:
        result = runner.invoke(cli, ["-c", config, "curp", "GOGM900101HDFRRS05"])
        assert result.exit_code == 0
        assert "VALIDACIÓN EXITOSA" in result.output
        assert "GOGM900101HDFRRS05" in result.output
        assert "**" not in result.output

    def test_invalid_exits_1(self, runner: CliRunner, config: str) -> None:
        result = runner.invoke(cli, ["-c", config, "curp", "GOGM900101HXXRRS05"])
        assert result.exit_code == 1
        assert "FORMATO INVÁLIDO" in result.output

    def test_lowercase_with_spaces(self, runner: CliRunner, config: str) -> None:
        result = runner.invoke(cli, ["-c", config, "curp", "gogm900101 hdfrrs05"])
        assert result.exit_code == 0

    def test_html_format(self, runner: CliRunner, config: str) -> None:
        result = runner.invoke(
            cli, ["-c", config, "curp", "GOGM900101HDFRRS05", "--format", "html"]
        )
        assert result.exit_code == 0
        assert "<strong>GOGM900101HDFRRS05</strong>" in result.output

    def test_config_max_year_applies(self, runner: CliRunner, config: str) -> None:
        result = runner.invoke(cli, ["-c", config, "curp", "GOGM260101HDFRRS05"])
        assert result.exit_code == 1
        assert "FECHA INVÁLIDA" in result.output


class TestRfcCommand:
    """Tests for the rfc command."""

    def test_persona_fisica(self, runner: CliRunner, config: str) -> None:
        result = runner.invoke(cli, ["-c", config, "rfc", "GOGM900101AB1"])
        assert result.exit_code == 0
        assert "Persona Física" in result.output

    def test_yaml_format(self, runner: CliRunner, config: str) -> None:
        result = runner.invoke(cli, ["-c", config, "rfc", "ABC900101AB1", "--format", "yaml"])
        assert result.exit_code == 0
        data = yaml.safe_load(result.output)
        assert data["kind"] == "success"
        assert data["person_type"] == "Persona Moral"

    def test_wrong_length(self, runner: CliRunner, config: str) -> None:
        result = runner.invoke(cli, ["-c", config, "rfc", "ABC"])
        assert result.exit_code == 1
        assert "LONGITUD INCORRECTA" in result.output


class TestMatchCommand:
    """Tests for the match command."""

    def test_confirmed(self, runner: CliRunner, config: str) -> None:
        result = runner.invoke(cli, ["-c", config, "match", "GOGM900101HDFRRS05", "GOGM900101AB1"])
        assert result.exit_code == 0
        assert "COINCIDENCIA VERIFICADA" in result.output

    def test_discrepancy(self, runner: CliRunner, config: str) -> None:
        result = runner.invoke(cli, ["-c", config, "match", "GOGM900101HDFRRS05", "PEPJ800101AB1"])
        assert result.exit_code == 1
        assert "DISCREPANCIA DETECTADA" in result.output


class TestBatchCommand:
    """Tests for the batch command."""

    def test_writes_report(self, runner: CliRunner, config: str, tmp_path: Path) -> None:
        batch = tmp_path / "batch.yaml"
        batch.write_text("- curp: GOGM900101HDFRRS05\n  rfc: GOGM900101AB1\n")
        report = tmp_path / "report.yaml"

        result = runner.invoke(cli, ["-c", config, "batch", str(batch), "-o", str(report)])

        assert result.exit_code == 0
        assert "Validated: 1 entries, 0 with issues" in result.output
        rows = yaml.safe_load(report.read_text(encoding="utf-8"))
        assert rows[0]["match"]["kind"] == "match_confirmed"

    def test_issues_exit_1(self, runner: CliRunner, config: str, tmp_path: Path) -> None:
        batch = tmp_path / "batch.yaml"
        batch.write_text("- curp: GOGM900101HDFRRS05\n- rfc: ABC\n")

        result = runner.invoke(cli, ["-c", config, "batch", str(batch)])

        assert result.exit_code == 1
        assert "Validated: 2 entries, 1 with issues" in result.output
        assert "wrong_length" in result.output

    def test_malformed_file(self, runner: CliRunner, config: str, tmp_path: Path) -> None:
        batch = tmp_path / "batch.yaml"
        batch.write_text("curp: GOGM900101HDFRRS05\n")

        result = runner.invoke(cli, ["-c", config, "batch", str(batch)])

        assert result.exit_code == 1
        assert "expected a list" in result.output
