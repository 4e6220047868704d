from .base import FixOutcome, Transformation, apply_transformations
from .html_fixer import HtmlFixer
from .jsx_transformer import FallbackRequired, JsxTransformer, StructuredEdit, TransformOutcome
from .text_fixer import TextualFixer

__all__ = [
    "FallbackRequired",
    "FixOutcome",
    "HtmlFixer",
    "JsxTransformer",
    "StructuredEdit",
    "TextualFixer",
    "TransformOutcome",
    "Transformation",
    "apply_transformations",
]
