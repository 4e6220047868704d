import re
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

CODE_SNIPPET_LIMIT = 100

_ATTRIBUTE_CODE = re.compile(r"""^\s*([\w:.-]+)\s*=\s*(["'])(.*)\2\s*$""", re.DOTALL)


class IssueType(str, Enum):
    MISSING_ALT_TEXT = "missing-alt-text"
    MISSING_ARIA_LABEL = "missing-aria-label"
    MISSING_FORM_LABEL = "missing-form-label"
    INVALID_ARIA_ATTRIBUTE = "invalid-aria-attribute"
    MISSING_HEADING_HIERARCHY = "missing-heading-hierarchy"
    MISSING_FOCUS_INDICATOR = "missing-focus-indicator"
    MISSING_LANDMARK = "missing-landmark"
    COLOR_CONTRAST = "color-contrast"
    MISSING_BUTTON_TYPE = "missing-button-type"
    DUPLICATE_ID = "duplicate-id"
    MISSING_LANG_ATTRIBUTE = "missing-lang-attribute"
    MISSING_SKIP_LINK = "missing-skip-link"
    INVALID_ROLE = "invalid-role"
    MISSING_KEYBOARD_HANDLER = "missing-keyboard-handler"


class Severity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class FixKind(str, Enum):
    ADD_ATTRIBUTE = "add-attribute"
    INSERT = "insert"
    REPLACE = "replace"
    REMOVE = "remove"


class FixPosition(BaseModel):
    model_config = ConfigDict(frozen=True)

    line: int = Field(ge=1)
    column: int = Field(ge=1)
    end_line: Optional[int] = None
    end_column: Optional[int] = None


class Fix(BaseModel):
    """A proposed remediation. Applying it twice must be a no-op."""

    model_config = ConfigDict(frozen=True)

    kind: FixKind
    description: str
    code: str
    position: FixPosition

    def attribute(self) -> tuple[str, str] | None:
        """Split `name="value"` add-attribute code into (name, value)."""
        if self.kind is not FixKind.ADD_ATTRIBUTE:
            return None
        match = _ATTRIBUTE_CODE.match(self.code)
        if not match:
            return None
        return match.group(1), match.group(3)


class Issue(BaseModel):
    """One detected defect, immutable once a scanner produced it"""

    model_config = ConfigDict(frozen=True)

    type: IssueType
    severity: Severity
    message: str
    line: int = Field(ge=1)
    column: int = Field(ge=1)
    code: str = ""
    fix: Optional[Fix] = None
    element: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _truncate_code(cls, data):
        if isinstance(data, dict) and isinstance(data.get("code"), str):
            code = data["code"]
            if len(code) > CODE_SNIPPET_LIMIT:
                data = {**data, "code": code[: CODE_SNIPPET_LIMIT - 3] + "..."}
        return data

    def with_fix(self, fix: Optional[Fix]) -> "Issue":
        return self.model_copy(update={"fix": fix})

    def with_severity(self, severity: Severity) -> "Issue":
        return self.model_copy(update={"severity": severity})


class ScanResult(BaseModel):
    file: str
    issues: List[Issue] = Field(default_factory=list)
    fixed: int = Field(default=0, ge=0)
    total: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _fixed_within_total(self) -> "ScanResult":
        if self.fixed > self.total:
            raise ValueError(f"fixed ({self.fixed}) exceeds total ({self.total})")
        return self

    @property
    def has_errors(self) -> bool:
        return any(issue.severity is Severity.ERROR for issue in self.issues)

    def count(self, severity: Severity) -> int:
        return sum(1 for issue in self.issues if issue.severity is severity)


class CacheEntry(BaseModel):
    content_hash: str
    timestamp: float
    result: ScanResult
