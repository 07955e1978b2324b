"""Integration tests for the templates CLI commands."""

import os
from pathlib import Path

from typer.testing import CliRunner

from labyrinth.cli.main import app

runner = CliRunner()


class TestTemplatesListCommand:
    def test_list_shows_layout_summaries(self) -> None:
        result = runner.invoke(app, ["templates", "list"])

        assert result.exit_code == 0
        assert "Available templates:" in result.output
        assert "standard" in result.output
        assert "classic via direct: 2 rooms, 1 doors" in result.output
        assert "classic via abstract_factory: 5 rooms, 4 doors" in result.output
        assert "enchanted via prototype: 4 rooms, 4 doors" in result.output


class TestTemplatesShowCommand:
    def test_show_builds_the_layout(self) -> None:
        result = runner.invoke(app, ["templates", "show", "enchanted-ring"])

        assert result.exit_code == 0
        assert "Maze (enchanted)" in result.output
        assert "Enchanted door with a spell between rooms 1 and 4" in result.output

    def test_show_unknown_template(self) -> None:
        result = runner.invoke(app, ["templates", "show", "castle"])

        assert result.exit_code == 1
        assert "Template not found: castle" in result.output
        assert "corridor, enchanted-ring, standard" in result.output


class TestTemplatesInitCommand:
    def test_init_creates_file_with_default_name(self, tmp_path: Path) -> None:
        original_cwd = os.getcwd()
        try:
            os.chdir(tmp_path)
            result = runner.invoke(app, ["templates", "init", "corridor"])

            assert result.exit_code == 0
            assert "Created: corridor.json (classic via abstract_factory)" in result.output
            assert (tmp_path / "corridor.json").exists()
        finally:
            os.chdir(original_cwd)

    def test_init_refuses_to_overwrite(self, tmp_path: Path) -> None:
        output = tmp_path / "layout.json"
        output.write_text("{}", encoding="utf-8")

        result = runner.invoke(app, ["templates", "init", "standard", "-o", str(output)])

        assert result.exit_code == 1
        assert "File already exists" in result.output
        assert output.read_text(encoding="utf-8") == "{}"

    def test_init_force_overwrites(self, tmp_path: Path) -> None:
        output = tmp_path / "layout.json"
        output.write_text("{}", encoding="utf-8")

        result = runner.invoke(
            app, ["templates", "init", "standard", "-o", str(output), "--force"]
        )

        assert result.exit_code == 0
        assert '"rooms"' in output.read_text(encoding="utf-8")

    def test_init_unknown_template(self, tmp_path: Path) -> None:
        result = runner.invoke(
            app, ["templates", "init", "castle", "-o", str(tmp_path / "x.json")]
        )

        assert result.exit_code == 1
        assert "Template not found: castle" in result.output

    def test_init_with_unbuildable_override_writes_nothing(self, tmp_path: Path) -> None:
        output = tmp_path / "x.json"

        result = runner.invoke(
            app,
            [
                "templates", "init", "standard", "-o", str(output),
                "--theme", "volcanic", "--strategy", "prototype",
            ],
        )

        assert result.exit_code == 1
        assert "Unknown exemplar: volcanic.room" in result.output
        assert not output.exists()

    def test_initialized_template_builds(self, tmp_path: Path) -> None:
        output = tmp_path / "hall.json"
        runner.invoke(
            app,
            ["templates", "init", "corridor", "-o", str(output), "--theme", "enchanted"],
        )

        result = runner.invoke(app, ["build", "--config", str(output), "--walk"])

        assert result.exit_code == 0
        assert "Enchanted room 5 with magical items" in result.output
        assert "opened door 4-5" in result.output
