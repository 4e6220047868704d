from a11y_linter.autofix import FixGenerator
from a11y_linter.fixers import FallbackRequired, JsxTransformer, StructuredEdit
from a11y_linter.models import Fix, FixKind, FixPosition, Issue, IssueType, Severity
from a11y_linter.scanners import JsxScanner


def _transform(code):
    issues = FixGenerator().generate_all(JsxScanner(code).scan())
    return JsxTransformer().transform(code, issues)


def test_attribute_goes_after_last_attribute():
    outcome = _transform('export const Logo = () => <img src="logo.png" className="logo" />;\n')
    assert isinstance(outcome, StructuredEdit)
    assert outcome.applied == 1
    assert outcome.source == 'export const Logo = () => <img src="logo.png" className="logo" alt="" />;\n'


def test_multiline_layout_is_preserved():
    code = """const Card = () => (
  <div>
    <img
      src="a.png"
      width={20}
    />
    <p>Text</p>
  </div>
);
"""
    outcome = _transform(code)
    assert isinstance(outcome, StructuredEdit)
    assert outcome.source == code.replace("width={20}", 'width={20} alt=""')


def test_bare_button_gets_both_attributes():
    outcome = _transform("const b = <button></button>;")
    assert isinstance(outcome, StructuredEdit)
    assert outcome.applied == 2
    assert outcome.source == 'const b = <button aria-label="Button" type="button"></button>;'


def test_form_label_on_input_without_attributes():
    outcome = _transform("const i = <input/>;")
    assert outcome.source == 'const i = <input aria-label="Input field"/>;'


def test_fixing_twice_is_a_no_op():
    first = _transform('const x = <html><body><img src="a" /></body></html>;')
    second = _transform(first.source)
    assert isinstance(second, StructuredEdit)
    assert second.applied == 0
    assert second.source == first.source
    assert first.source.count('lang="en"') == 1


def _issue(code, line, column, kind=FixKind.ADD_ATTRIBUTE, issue_type=IssueType.MISSING_ALT_TEXT):
    return Issue(
        type=issue_type,
        severity=Severity.ERROR,
        message="m",
        line=line,
        column=column,
        fix=Fix(kind=kind, description="d", code=code, position=FixPosition(line=line, column=column)),
    )


def test_stale_issue_for_present_attribute_is_skipped():
    code = 'const x = <img src="a" alt="" />;'
    outcome = JsxTransformer().transform(code, [_issue('alt=""', 1, 11)])
    assert outcome == StructuredEdit(source=code, applied=0)


def test_duplicate_fixes_insert_once():
    code = "const x = <img />;"
    outcome = JsxTransformer().transform(code, [_issue('alt=""', 1, 11), _issue('alt=""', 1, 11)])
    assert outcome == StructuredEdit(source='const x = <img alt="" />;', applied=1)


def test_labelledby_blocks_name_fix():
    code = 'const x = <button type="button" aria-labelledby="t"></button>;'
    issue = _issue('aria-label="Button"', 1, 11, issue_type=IssueType.MISSING_ARIA_LABEL)
    assert JsxTransformer().transform(code, [issue]) == StructuredEdit(source=code, applied=0)


def test_unsupported_kind_requires_fallback():
    outcome = JsxTransformer().transform("const x = <img />;", [_issue("// note", 1, 1, kind=FixKind.INSERT)])
    assert isinstance(outcome, FallbackRequired)
    assert "insert" in outcome.reason


def test_unparseable_source_requires_fallback():
    outcome = JsxTransformer().transform("const x = <img src='a'>;", [_issue('alt=""', 1, 11)])
    assert isinstance(outcome, FallbackRequired)


def test_missing_target_requires_fallback():
    outcome = JsxTransformer().transform("const x = <img />;", [_issue('alt=""', 1, 3)])
    assert isinstance(outcome, FallbackRequired)


def test_no_fixes_returns_input():
    code = "const x = <img />;"
    assert JsxTransformer().transform(code, []) == StructuredEdit(source=code, applied=0)
