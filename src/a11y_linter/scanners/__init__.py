from .html_scanner import HtmlScanner, parse_html
from .jsx_scanner import JsxScanner

__all__ = ["HtmlScanner", "JsxScanner", "parse_html"]
