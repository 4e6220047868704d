from .rules.base import DocumentRule, ElementRule


class RuleRegistry:
    """Registry for managing and loading the ordered rule batteries"""

    def __init__(self, load_builtins: bool = True):
        self._document_rules: list[DocumentRule] = []
        self._element_rules: list[ElementRule] = []
        if load_builtins:
            self._load_builtin_rules()

    def register(self, rule: DocumentRule | ElementRule):
        if isinstance(rule, DocumentRule):
            self._document_rules.append(rule)
        elif isinstance(rule, ElementRule):
            self._element_rules.append(rule)
        else:
            raise TypeError(f"Unsupported rule type: {type(rule).__name__}")

    def document_rules(self) -> list[DocumentRule]:
        return list(self._document_rules)

    def element_rules(self) -> list[ElementRule]:
        return list(self._element_rules)

    def _load_builtin_rules(self):
        from .rules.html_rules import (
            DuplicateIdRule,
            HeadingHierarchyRule,
            InvalidRoleRule,
            LandmarkRule,
            MissingAltTextRule,
            MissingAriaLabelRule,
            MissingButtonTypeRule,
            MissingFormLabelRule,
            MissingLangRule,
        )
        from .rules.jsx_rules import (
            JsxDuplicateIdRule,
            JsxHeadingLevelRule,
            JsxInvalidRoleRule,
            JsxMissingAltTextRule,
            JsxMissingAriaLabelRule,
            JsxMissingButtonTypeRule,
            JsxMissingFormLabelRule,
            JsxMissingLangRule,
        )

        # Order matters: issues are reported in rule order
        self.register(MissingAltTextRule())
        self.register(MissingAriaLabelRule())
        self.register(MissingFormLabelRule())
        self.register(MissingButtonTypeRule())
        self.register(DuplicateIdRule())
        self.register(MissingLangRule())
        self.register(HeadingHierarchyRule())
        self.register(LandmarkRule())
        self.register(InvalidRoleRule())

        self.register(JsxMissingAltTextRule())
        self.register(JsxMissingAriaLabelRule())
        self.register(JsxMissingButtonTypeRule())
        self.register(JsxMissingFormLabelRule())
        self.register(JsxDuplicateIdRule())
        self.register(JsxHeadingLevelRule())
        self.register(JsxInvalidRoleRule())
        self.register(JsxMissingLangRule())


registry = RuleRegistry()
