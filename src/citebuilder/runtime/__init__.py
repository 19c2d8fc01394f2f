from citebuilder.runtime.config import BuildOptions

__all__ = ["BuildOptions"]
