"""lwcindex - live registry of component tags for editor tooling."""

from lwcindex.__version__ import __version__

__all__ = ["__version__"]
