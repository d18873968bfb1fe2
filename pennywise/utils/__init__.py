"""Mini README: Small helpers shared across Pennywise sub-packages.

Modules here import nothing else from the package, so any layer can use
them without creating import cycles.
"""

from .labels import label

__all__ = ["label"]
