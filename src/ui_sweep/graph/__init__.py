"""Used-set accumulation over the whole source tree."""

from .used_set import TreeSnapshot, UsedSet, build_snapshot, build_used_set, iter_edges

__all__ = ["TreeSnapshot", "UsedSet", "build_snapshot", "build_used_set", "iter_edges"]
