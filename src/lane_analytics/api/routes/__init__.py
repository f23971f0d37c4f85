"""Route group exports."""

from . import analysis, clusters, health, lanes

__all__ = ["analysis", "clusters", "health", "lanes"]
