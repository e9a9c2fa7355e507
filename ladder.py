# ladder.py
# Breadth-first search over words one edit apart, with predecessor tracking.

import time
from typing import Callable, Dict, List, NamedTuple, Optional, Tuple

from utils import vlog
from word import (
    SHIFT_POSITIONS,
    WordError,
    decode,
    dupl_first,
    encode,
    is_valid,
    length,
    neighbours,
    pop,
    rotate,
    shifts,
)

# Expansion levels before a search gives up
MAX_DEPTH = 31


class LadderResult(NamedTuple):
    path: List[str]
    depth: int


def search(
    start: int,
    target: int,
    max_length: int,
    max_depth: int = MAX_DEPTH,
    on_level: Optional[Callable[[int, int, int, bool], None]] = None,
) -> Tuple[Dict[int, Tuple[int, int]], Optional[int]]:
    """Expand whole BFS levels from ``start`` until ``target`` is seen.

    Returns ``(visited, depth)``. ``visited`` maps every word reached to
    ``(depth, predecessor)``; the start word is its own predecessor at depth 0.
    ``depth`` is None when the frontier empties or ``max_depth`` levels pass
    without reaching the target.
    """
    visited: Dict[int, Tuple[int, int]] = {start: (0, start)}
    if start == target:
        return visited, 0

    frontier = [start]
    for depth in range(1, max_depth + 1):
        next_frontier = []
        for k in frontier:
            for w in neighbours(k, max_length):
                if w not in visited:
                    visited[w] = (depth, k)
                    next_frontier.append(w)

        found = target in visited
        if on_level is not None:
            on_level(depth, len(next_frontier), len(visited), found)
        if found:
            return visited, depth
        if not next_frontier:
            break
        frontier = next_frontier
    return visited, None


def reconstruct_path(visited: Dict[int, Tuple[int, int]], start: int, target: int) -> List[int]:
    path = [target]
    cur = target
    while cur != start:
        _, cur = visited[cur]
        path.append(cur)
    path.reverse()
    return path


def _one_edit(a: int, b: int, max_length: int) -> bool:
    if b == dupl_first(a, max_length) or b == pop(a):
        return True
    return b in shifts(a) or b in rotate(a)


def verify_path(path: List[int], max_length: int) -> bool:
    """True if every consecutive pair in ``path`` is exactly one edit apart."""
    if not path:
        return False
    if any(not is_valid(w) or length(w) > max_length for w in path):
        return False
    return all(_one_edit(a, b, max_length) for a, b in zip(path, path[1:]))


def length_cap(start: str, target: str, max_length: Optional[int] = None) -> int:
    """Resolve the longest word a search may build between ``start`` and ``target``."""
    longest = max(len(start), len(target))
    if max_length is None:
        max_length = longest
    if max_length < longest:
        raise WordError(f"max length {max_length} is shorter than the longer word ({longest} letters)")
    if max_length > SHIFT_POSITIONS:
        raise WordError(f"max length {max_length} is above the {SHIFT_POSITIONS} shiftable positions")
    return max_length


def find_ladder(
    start: str,
    target: str,
    max_length: Optional[int] = None,
    max_depth: int = MAX_DEPTH,
    on_level: Optional[Callable[[int, int, int, bool], None]] = None,
) -> Optional[LadderResult]:
    """Shortest edit ladder from ``start`` to ``target``.

    Returns a ``LadderResult`` with the decoded words (both ends included) and
    the number of levels expanded, or None when no ladder exists within
    ``max_depth``. Bad words or caps raise ``WordError`` before searching.
    """
    cap = length_cap(start, target, max_length)
    start_word = encode(start, cap)
    target_word = encode(target, cap)

    t0 = time.time()
    visited, depth = search(start_word, target_word, cap, max_depth, on_level)
    vlog(f"search {start} -> {target}: {len(visited)} words visited", t0)
    if depth is None:
        return None
    path = reconstruct_path(visited, start_word, target_word)
    return LadderResult([decode(w) for w in path], depth)
