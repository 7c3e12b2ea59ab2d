import json
from pathlib import Path
from typer.testing import CliRunner
from assertdocs.services.readme.cli import app

runner = CliRunner()


def test_run_writes_readme(tmp_path: Path, manifest_file):
    out = tmp_path / "docs" / "README.md"
    result = runner.invoke(app, ["run", "--manifest", str(manifest_file), "--out", str(out)])
    assert result.exit_code == 0, result.output

    text = out.read_text(encoding="utf-8")
    assert "- **StringAssertTrait**<br/>\n  Additional string asserts." in text
    assert "Requires PHPUnit 6." in text
    assert "###### assertStringIsEmpty(mixed $actual [, string $message = ''])" in text
    assert "The inverse assertion\n#### assertStringIsNotEmpty()" in text
    assert "AssertHelper" not in text


def test_run_only_selected_classes(tmp_path: Path, manifest_file):
    out = tmp_path / "README.md"
    args = ["run", "Gecko\\Asserts\\AssertHelper", "--manifest", str(manifest_file), "--out", str(out)]
    result = runner.invoke(app, args)
    assert result.exit_code == 0, result.output
    assert "StringAssertTrait" not in out.read_text(encoding="utf-8")


def test_check_reports_fresh_and_stale(tmp_path: Path, manifest_file):
    readme = tmp_path / "README.md"
    runner.invoke(app, ["run", "--manifest", str(manifest_file), "--out", str(readme)])

    result = runner.invoke(app, ["check", "--manifest", str(manifest_file), "--readme", str(readme)])
    assert result.exit_code == 0, result.output
    assert "up-to-date" in result.output

    readme.write_text(readme.read_text(encoding="utf-8").replace("string is empty", "string is blank"))
    result = runner.invoke(app, ["check", "--manifest", str(manifest_file), "--readme", str(readme)])
    assert result.exit_code == 1
    assert "stale" in result.output


def test_generation_error_exits_with_code_2(tmp_path: Path, manifest_data):
    manifest_data["classes"]["Gecko\\Asserts\\StringAssertTrait"]["methods"][0]["parameters"].append({"name": "extra"})
    manifest = tmp_path / "m.json"
    manifest.write_text(json.dumps(manifest_data), encoding="utf-8")

    result = runner.invoke(app, ["run", "--manifest", str(manifest), "--out", str(tmp_path / "R.md")])
    assert result.exit_code == 2
    assert "extra" in result.output
    assert not (tmp_path / "R.md").exists()


def test_defaults_come_from_env_file(tmp_path: Path, manifest_file, monkeypatch):
    (tmp_path / ".env").write_text(
        f"ASSERTDOCS_MANIFEST={manifest_file.name}\nASSERTDOCS_README=OUT.md\n", encoding="utf-8"
    )
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["run"])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "OUT.md").exists()
