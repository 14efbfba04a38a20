"""Integration tests for the helpbook CLI"""

import pytest
from typer.testing import CliRunner

from helpbook.cli.cli import app
from helpbook.config import Settings


runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    for name in Settings.model_fields:
        monkeypatch.delenv(f"HELPBOOK_{name.upper()}", raising=False)


def test_cli_help():
    """--help lists every command."""
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    for command in ("build", "init", "providers"):
        assert command in result.output


def test_build_cmd_runs_full_pipeline(tmp_path, content_dir):
    """build writes a .help bundle named after --bundle-name."""
    result = runner.invoke(app, [
        "build", str(content_dir),
        "--out-dir", str(tmp_path / "dist"),
        "--bundle-name", "MyApp",
        "--title", "MyApp Guide",
        "--bundle-id", "com.acme.myapp.help",
        "--theme", "tiger",
    ])
    assert result.exit_code == 0, result.output
    assert "4 document(s)" in result.output
    root = tmp_path / "dist" / "MyApp.help" / "Contents" / "Resources" / "en.lproj"
    assert (root / "index.html").is_file()
    assert "MyApp Guide" in (root / "index.html").read_text()
    assert (root / "guides" / "basic-usage.html").is_file()


def test_build_cmd_uses_config_file(tmp_path, content_dir):
    """Settings come from helpbook.yaml in the working directory."""
    (tmp_path / "helpbook.yaml").write_text(f"content_dir: {content_dir}\noutput_dir: out\nbundle_name: FromYaml\n")
    result = runner.invoke(app, ["build"])
    assert result.exit_code == 0, result.output
    assert (tmp_path / "out" / "FromYaml.help" / "Contents" / "Info.plist").is_file()


def test_build_cmd_custom_css_implies_custom_theme(tmp_path, content_dir):
    """--custom-css alone selects the custom theme."""
    css = tmp_path / "brand.css"
    css.write_text("body { color: teal; }")
    result = runner.invoke(app, [
        "build", str(content_dir), "--out-dir", str(tmp_path / "dist"), "--custom-css", str(css),
    ])
    assert result.exit_code == 0, result.output
    style = tmp_path / "dist" / "content.help" / "Contents" / "Resources" / "en.lproj" / "assets" / "style.css"
    assert style.read_text() == "body { color: teal; }"


def test_build_cmd_missing_content(tmp_path):
    """A missing content directory exits 1 with an error message."""
    result = runner.invoke(app, ["build", str(tmp_path / "nope")])
    assert result.exit_code == 1
    assert "Error: Build failed" in result.output


def test_build_cmd_custom_theme_without_css(content_dir):
    """--theme custom without a stylesheet is a config error."""
    result = runner.invoke(app, ["build", str(content_dir), "--theme", "custom"])
    assert result.exit_code == 1
    assert "custom_css" in result.output


def test_build_cmd_unknown_provider(content_dir):
    """An unknown provider exits 1."""
    result = runner.invoke(app, ["build", str(content_dir), "--provider", "jekyll"])
    assert result.exit_code == 1
    assert "Unknown content provider" in result.output


def test_init_cmd_writes_template(tmp_path):
    """init writes helpbook.yaml with defaults."""
    result = runner.invoke(app, ["init"])
    assert result.exit_code == 0, result.output
    assert "content_dir: content" in (tmp_path / "helpbook.yaml").read_text()


def test_init_cmd_refuses_overwrite(tmp_path):
    """init keeps an existing file unless --force is given."""
    (tmp_path / "helpbook.yaml").write_text("bundle_name: Mine\n")
    result = runner.invoke(app, ["init"])
    assert result.exit_code == 1
    assert (tmp_path / "helpbook.yaml").read_text() == "bundle_name: Mine\n"

    result = runner.invoke(app, ["init", "--force"])
    assert result.exit_code == 0
    assert "bundle_name: null" in (tmp_path / "helpbook.yaml").read_text()


def test_providers_cmd():
    """providers lists the registered providers."""
    result = runner.invoke(app, ["providers"])
    assert result.exit_code == 0
    assert "hugo\tHugo" in result.output


def test_verbose_flag(tmp_path, content_dir):
    """--verbose is accepted before any command."""
    result = runner.invoke(app, ["--verbose", "build", str(content_dir), "--out-dir", str(tmp_path / "dist")])
    assert result.exit_code == 0, result.output
