"""
Path reconstruction from a predecessor map.
"""

from __future__ import annotations

from typing import Mapping

from pathtrace.algorithms.types import Distance, is_reachable


def rebuild_path(previous: Mapping[str, str | None], target: str) -> list[str]:
    """
    Walk predecessor links back from `target` and return the path in
    source -> target order.

    Raises:
        RuntimeError: If the predecessor chain loops. The single-source
            algorithms never produce such a chain, so this signals a bug.
    """
    path: list[str] = []
    seen: set[str] = set()
    current: str | None = target
    while current is not None:
        if current in seen:
            raise RuntimeError(f"Predecessor chain for {target} loops at {current}")
        seen.add(current)
        path.append(current)
        current = previous.get(current)
    path.reverse()
    return path


def build_paths(
    source_id: str,
    distances: Mapping[str, Distance],
    previous: Mapping[str, str | None],
) -> dict[str, list[str]]:
    """Paths to every reachable node except the source, in distance-map order."""
    return {
        node_id: rebuild_path(previous, node_id)
        for node_id, distance in distances.items()
        if node_id != source_id and is_reachable(distance)
    }
