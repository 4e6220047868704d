import json

from typer.testing import CliRunner

from a11y_cli.main import app

runner = CliRunner()

BROKEN = '<html>\n<body>\n<main>\n<img src="a.png">\n</main>\n</body>\n</html>\n'
CLEAN = '<html lang="en"><body><main><h1>Hello</h1></main></body></html>'


def test_cli_help():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "--fix" in result.stdout


def test_cli_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "a11y-fix" in result.stdout


def test_clean_file_exits_zero(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "index.html").write_text(CLEAN)
    result = runner.invoke(app, ["*.html", "--no-cache"])
    assert result.exit_code == 0
    assert "Files Scanned: 1" in result.stdout


def test_errors_exit_one(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "index.html").write_text(BROKEN)
    result = runner.invoke(app, ["index.html", "--no-parallel"])
    assert result.exit_code == 1
    assert "missing-alt-text" in result.stdout
    assert "Auto-fix available" in result.stdout
    assert (tmp_path / ".a11y-cache" / "cache.json").exists()


def test_fix_rewrites_file_and_exits_zero(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    page = tmp_path / "index.html"
    page.write_text(BROKEN)
    result = runner.invoke(app, ["index.html", "--fix"])
    assert result.exit_code == 0
    content = page.read_text()
    assert 'alt=""' in content
    assert 'lang="en"' in content
    assert "Auto-fixed: 2" in result.stdout


def test_html_report(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "index.html").write_text(BROKEN)
    result = runner.invoke(app, ["index.html", "--report", "--output", "out.html", "--no-cache"])
    assert result.exit_code == 1
    report = (tmp_path / "out.html").read_text()
    assert "Accessibility Scan Report" in report
    assert "missing-alt-text" in report
    assert "&lt;img src=&quot;a.png&quot;&gt;" in report


def test_json_report(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "index.html").write_text(BROKEN)
    runner.invoke(app, ["index.html", "--report", "--json", "--no-cache"])
    data = json.loads((tmp_path / "a11y-report.json").read_text())
    assert data[0]["total"] == 2
    assert {issue["type"] for issue in data[0]["issues"]} == {"missing-alt-text", "missing-lang-attribute"}


def test_config_file_disables_rule(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "index.html").write_text(BROKEN)
    (tmp_path / ".a11yfix.toml").write_text(
        "[tool.a11y-fix.rules.missing-alt-text]\nenabled = false\n"
        "[tool.a11y-fix.rules.missing-lang-attribute]\nseverity = \"warning\"\n"
    )
    result = runner.invoke(app, ["index.html", "--no-cache"])
    assert result.exit_code == 0
    assert "missing-alt-text" not in result.stdout


def test_bad_config_exits_two(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "index.html").write_text(CLEAN)
    (tmp_path / "broken.toml").write_text("[tool.a11y-fix\n")
    result = runner.invoke(app, ["index.html", "--config", "broken.toml"])
    assert result.exit_code == 2


def test_ignore_option(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "index.html").write_text(BROKEN)
    result = runner.invoke(app, ["*.html", "--ignore", "index.html", "--no-cache"])
    assert result.exit_code == 0
    assert "No files matched" in result.stdout
