import json

import pytest

from a11y_cli.config import ConfigError, load_config
from a11y_linter.config import A11yConfig, apply_rule_overrides
from a11y_linter.models import Issue, IssueType, Severity


def test_defaults():
    config = A11yConfig()
    assert config.fix is False
    assert config.report is False
    assert config.report_path == "a11y-report.html"
    assert config.performance.cache is True
    assert config.performance.parallel is True
    assert config.performance.max_concurrency == 10
    assert config.performance.cache_dir == ".a11y-cache"
    assert config.auto_fix.generate_aria_labels is True
    assert config.auto_fix.wrap_inputs_with_labels is True


def test_camel_case_keys_are_accepted():
    config = A11yConfig.model_validate(
        {
            "reportPath": "out.html",
            "performance": {"maxConcurrency": 4, "cacheDir": "tmp-cache"},
            "autoFix": {"generateAriaLabels": False},
        }
    )
    assert config.report_path == "out.html"
    assert config.performance.max_concurrency == 4
    assert config.performance.cache_dir == "tmp-cache"
    assert config.auto_fix.generate_aria_labels is False
    assert config.auto_fix.wrap_inputs_with_labels is True


def test_max_concurrency_must_be_positive():
    with pytest.raises(ValueError):
        A11yConfig.model_validate({"performance": {"max_concurrency": 0}})


def test_merged_skips_none_and_merges_sections():
    base = A11yConfig.model_validate({"fix": True, "performance": {"cache_dir": "c"}})
    merged = base.merged({"fix": None, "report": True, "performance": {"parallel": False}})
    assert merged.fix is True
    assert merged.report is True
    assert merged.performance.parallel is False
    assert merged.performance.cache_dir == "c"
    assert base.report is False


def _issue(issue_type, severity=Severity.ERROR):
    return Issue(type=issue_type, severity=severity, message="m", line=1, column=1)


def test_rule_overrides_disable_and_change_severity():
    config = A11yConfig.model_validate(
        {
            "rules": {
                "duplicate-id": {"enabled": False},
                "missing-alt-text": {"severity": "warning"},
            }
        }
    )
    issues = [
        _issue(IssueType.DUPLICATE_ID),
        _issue(IssueType.MISSING_ALT_TEXT),
        _issue(IssueType.INVALID_ROLE),
    ]
    result = apply_rule_overrides(issues, config)
    assert [i.type for i in result] == [IssueType.MISSING_ALT_TEXT, IssueType.INVALID_ROLE]
    assert result[0].severity is Severity.WARNING
    assert result[1].severity is Severity.ERROR
    assert not config.is_rule_enabled(IssueType.DUPLICATE_ID)
    assert config.is_rule_enabled(IssueType.INVALID_ROLE)


def test_load_toml_tool_table(tmp_path):
    path = tmp_path / ".a11yfix.toml"
    path.write_text(
        """
[tool.a11y-fix]
fix = true
ignore = ["legacy/**"]

[tool.a11y-fix.performance]
maxConcurrency = 2

[tool.a11y-fix.rules.missing-landmark]
enabled = false
"""
    )
    config = load_config(path)
    assert config.fix is True
    assert config.ignore == ["legacy/**"]
    assert config.performance.max_concurrency == 2
    assert not config.is_rule_enabled(IssueType.MISSING_LANDMARK)


def test_load_json(tmp_path):
    path = tmp_path / "a11y.json"
    path.write_text(json.dumps({"report": True, "autoFix": {"wrapInputsWithLabels": False}}))
    config = load_config(path)
    assert config.report is True
    assert config.auto_fix.wrap_inputs_with_labels is False


def test_default_file_is_optional(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert load_config(None) == A11yConfig()


def test_default_file_is_picked_up(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".a11yfix.toml").write_text("[tool.a11y-fix]\nreport = true\n")
    assert load_config(None).report is True


def test_missing_explicit_file_raises(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "nope.toml")


def test_invalid_toml_raises(tmp_path):
    path = tmp_path / "bad.toml"
    path.write_text("[tool.a11y-fix\nfix = ")
    with pytest.raises(ConfigError):
        load_config(path)


def test_invalid_values_raise(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"performance": {"maxConcurrency": "many"}}))
    with pytest.raises(ConfigError):
        load_config(path)
