# mcqbank/services/sampler.py
import random
from typing import Generic, List, Sequence, TypeVar

from pydantic import BaseModel

T = TypeVar("T")

class Page(BaseModel, Generic[T]):
    items: List[T]
    total: int
    page: int
    page_size: int
    total_pages: int

def shuffle(pool: Sequence[T], rng: random.Random) -> List[T]:
    """
    Returns a uniformly shuffled copy of ``pool`` (Fisher-Yates).

    Every permutation is equally likely given a uniform ``rng``; the input is
    left untouched.
    """
    items = list(pool)
    for i in range(len(items) - 1, 0, -1):
        j = rng.randint(0, i)
        items[i], items[j] = items[j], items[i]
    return items

def paginate(items: Sequence[T], page: int, page_size: int) -> Page[T]:
    """Slices one page out of ``items`` in their given order. Pages past the end are empty."""
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")

    total = len(items)
    start = (page - 1) * page_size
    return Page(
        items=list(items[start:start + page_size]),
        total=total,
        page=page,
        page_size=page_size,
        total_pages=-(-total // page_size),  # ceil(total / page_size)
    )

def take_page(pool: Sequence[T], page: int, page_size: int, rng: random.Random) -> Page[T]:
    # Each call reshuffles, so consecutive pages may overlap.
    return paginate(shuffle(pool, rng), page, page_size)

def take_random(pool: Sequence[T], count: int, rng: random.Random) -> List[T]:
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")
    return shuffle(pool, rng)[:count]
