from .base import BaseRule, DocumentRule, ElementRule, HtmlContext, JsxContext

__all__ = ["BaseRule", "DocumentRule", "ElementRule", "HtmlContext", "JsxContext"]
