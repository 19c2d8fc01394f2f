"""Citation expansion and rendering."""
from citebuilder.rendering.builder import CitationBuilder, build_citation
from citebuilder.rendering.expander import FragmentExpander
from citebuilder.rendering.template_engine import CitationTemplateEngine

__all__ = ["CitationBuilder", "CitationTemplateEngine", "FragmentExpander", "build_citation"]
