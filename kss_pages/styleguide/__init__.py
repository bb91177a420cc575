"""The style guide model consumed by the page generator."""

from .loader import StyleGuideFormatError, load_style_guide, normalize_reference
from .models import (
    Modifier,
    Parameter,
    Section,
    StyleGuide,
    StyleGuideMeta,
    reference_root,
    split_reference,
)

__all__ = [
    "Modifier",
    "Parameter",
    "Section",
    "StyleGuide",
    "StyleGuideFormatError",
    "StyleGuideMeta",
    "load_style_guide",
    "normalize_reference",
    "reference_root",
    "split_reference",
]
