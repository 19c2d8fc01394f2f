"""Template validation and segmentation."""
from citebuilder.parsing.segmenter import Segmenter
from citebuilder.parsing.validator import TemplateValidator

__all__ = ["Segmenter", "TemplateValidator"]
