from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .models import Issue, IssueType, Severity

_MODEL_CONFIG = ConfigDict(
    frozen=True,
    alias_generator=to_camel,
    populate_by_name=True,
    extra="ignore",
)


class PerformanceConfig(BaseModel):
    model_config = _MODEL_CONFIG

    cache: bool = True
    cache_dir: str = ".a11y-cache"
    parallel: bool = True
    max_concurrency: int = Field(default=10, ge=1)


class AutoFixConfig(BaseModel):
    model_config = _MODEL_CONFIG

    generate_aria_labels: bool = True
    wrap_inputs_with_labels: bool = True


class RuleConfig(BaseModel):
    model_config = _MODEL_CONFIG

    enabled: bool = True
    severity: Optional[Severity] = None


class A11yConfig(BaseModel):
    """Resolved options for a run; read-only once orchestration starts."""

    model_config = _MODEL_CONFIG

    fix: bool = False
    report: bool = False
    report_path: str = "a11y-report.html"
    ignore: List[str] = Field(default_factory=list)
    performance: PerformanceConfig = Field(default_factory=PerformanceConfig)
    auto_fix: AutoFixConfig = Field(default_factory=AutoFixConfig)
    rules: Dict[IssueType, RuleConfig] = Field(default_factory=dict)

    def is_rule_enabled(self, issue_type: IssueType) -> bool:
        rule = self.rules.get(issue_type)
        return rule is None or rule.enabled

    def merged(self, overrides: Dict[str, Any]) -> "A11yConfig":
        """Copy with fields replaced; nested sections are merged one level deep.

        None values are ignored so unset CLI flags keep the file's value.
        """
        data = self.model_dump()
        for key, value in overrides.items():
            if value is None:
                continue
            if isinstance(value, dict) and isinstance(data.get(key), dict):
                data[key] = {**data[key], **value}
            else:
                data[key] = value
        return A11yConfig.model_validate(data)


def apply_rule_overrides(issues: List[Issue], config: A11yConfig) -> List[Issue]:
    """Drop disabled rule types and apply severity overrides, keeping scan order."""
    if not config.rules:
        return list(issues)
    result = []
    for issue in issues:
        rule = config.rules.get(issue.type)
        if rule is None:
            result.append(issue)
            continue
        if not rule.enabled:
            continue
        if rule.severity is not None and rule.severity is not issue.severity:
            issue = issue.with_severity(rule.severity)
        result.append(issue)
    return result
