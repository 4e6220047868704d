"""WAI-ARIA role vocabulary and per-element defaults."""

VALID_ROLES = frozenset(
    {
        "alert", "alertdialog", "application", "article", "banner", "button",
        "cell", "checkbox", "columnheader", "combobox", "complementary", "contentinfo",
        "definition", "dialog", "directory", "document", "feed", "figure", "form",
        "grid", "gridcell", "group", "heading", "img", "link", "list", "listbox",
        "listitem", "log", "main", "marquee", "math", "menu", "menubar", "menuitem",
        "menuitemcheckbox", "menuitemradio", "navigation", "none", "note", "option",
        "presentation", "progressbar", "radio", "radiogroup", "region", "row",
        "rowgroup", "rowheader", "scrollbar", "search", "searchbox", "separator",
        "slider", "spinbutton", "status", "switch", "tab", "table", "tablist",
        "tabpanel", "term", "textbox", "timer", "toolbar", "tooltip", "tree",
        "treegrid", "treeitem",
    }
)  # fmt: skip

FORM_CONTROLS = ("input", "textarea", "select")
NAME_ATTRIBUTES = ("aria-label", "aria-labelledby")
CLICK_HANDLERS = ("onClick", "onMouseDown", "onMouseUp")
MAX_HEADING_LEVEL = 6
NAV_LINK_THRESHOLD = 3

DEFAULT_LABELS = {
    "button": "Button",
    "a": "Link",
    "input": "Input field",
    "select": "Select option",
    "textarea": "Text area",
    "div": "Interactive element",
}
FALLBACK_LABEL = "Interactive element"
FORM_FIELD_LABEL = "Input field"


def default_label(tag_name: str | None) -> str:
    return DEFAULT_LABELS.get((tag_name or "").lower(), FALLBACK_LABEL)


def is_valid_role(role: str) -> bool:
    return role in VALID_ROLES
