from typing import List, Sequence, Tuple, TypeVar

T = TypeVar("T")


def page_bounds(page: int, size: int, total: int) -> Tuple[int, int]:
    """Clamp the [from, to) window of a zero-based page to ``total`` items."""
    start = min(page * size, total)
    end = min(start + size, total)
    return start, end


def paginate(items: Sequence[T], page: int, size: int) -> Tuple[List[T], int]:
    """Return one page of ``items`` together with the full item count."""
    total = len(items)
    start, end = page_bounds(page, size, total)
    return list(items[start:end]), total
