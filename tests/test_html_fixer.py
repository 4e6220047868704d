from a11y_linter.autofix import FixGenerator
from a11y_linter.fixers import HtmlFixer
from a11y_linter.models import Fix, FixKind, FixPosition, Issue, IssueType, Severity
from a11y_linter.scanners import HtmlScanner


def _fixable_issues(html):
    return FixGenerator().generate_all(HtmlScanner(html).scan())


def _fix(html):
    return HtmlFixer().apply(html, _fixable_issues(html))


def test_images_get_empty_alt_and_existing_alt_is_kept():
    html = '<main><img src="a.png"><img src="b.png" alt="Chart"></main>'
    outcome = _fix(html)
    assert outcome.applied == 1
    assert outcome.source.count('alt=""') == 1
    assert 'alt="Chart"' in outcome.source
    rescanned = HtmlScanner(outcome.source).scan()
    assert [i for i in rescanned if i.type is IssueType.MISSING_ALT_TEXT] == []


def test_second_pass_is_byte_identical():
    html = '<html><body><main><img src="a.png"><button></button></main></body></html>'
    first = _fix(html)
    second = _fix(first.source)
    assert first.applied > 0
    assert second.applied == 0
    assert second.source == first.source


def test_no_fixes_returns_input_unchanged():
    html = "<main>\n  <p>Nothing   to do</p>\n</main>\n"
    outcome = HtmlFixer().apply(html, [])
    assert outcome.source == html
    assert not outcome.modified


def test_lang_is_added_once_even_with_stale_issues():
    html = "<html><head><title>T</title></head><body><main></main></body></html>"
    issues = _fixable_issues(html)
    first = HtmlFixer().apply(html, issues)
    second = HtmlFixer().apply(first.source, issues)
    assert first.source.count('lang="en"') == 1
    assert second.applied == 0
    assert second.source == first.source


def test_bare_button_gets_type_and_name():
    outcome = _fix("<main><button></button></main>")
    assert outcome.applied == 2
    assert 'type="button"' in outcome.source
    assert 'aria-label="Button"' in outcome.source


def test_form_controls_get_a_label():
    outcome = _fix('<main><input type="text"><select></select></main>')
    assert outcome.source.count('aria-label="Input field"') == 2


def _aria_issue(line, column, element="button"):
    return Issue(
        type=IssueType.MISSING_ARIA_LABEL,
        severity=Severity.WARNING,
        message="m",
        line=line,
        column=column,
        element=element,
        fix=Fix(
            kind=FixKind.ADD_ATTRIBUTE,
            description="Add aria-label attribute",
            code='aria-label="Button"',
            position=FixPosition(line=line, column=column),
        ),
    )


def test_extracted_text_is_preferred_for_names():
    outcome = HtmlFixer().apply("<button>  Save   draft </button>", [_aria_issue(1, 1)])
    assert 'aria-label="Save draft"' in outcome.source


def test_labelledby_blocks_name_fix():
    html = '<button aria-labelledby="t"></button>'
    outcome = HtmlFixer().apply(html, [_aria_issue(1, 1)])
    assert outcome.applied == 0
    assert outcome.source == html


def test_issue_without_matching_tag_is_skipped():
    html = "<p>\n<button></button>\n</p>"
    outcome = HtmlFixer().apply(html, [_aria_issue(9, 9)])
    assert outcome.applied == 0
    assert outcome.source == html
