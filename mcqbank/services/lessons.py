# mcqbank/services/lessons.py
import math
import re
from typing import List, Optional, Tuple

from pydantic import BaseModel

from mcqbank.models.lesson import LessonSummary
from mcqbank.services.repository import RepositoryIndex
from mcqbank.services.sampler import paginate

# "lesson12", "lesson-12", "Lesson_12" or just trailing digits
LESSON_NUMBER_RE = re.compile(r"(?:lesson[-_]?)?([0-9]+)$", re.IGNORECASE)
_CHUNK_RE = re.compile(r"([0-9]+)")

class LessonPage(BaseModel):
    lessons: List[LessonSummary]
    total_lessons: int
    page: int
    page_size: int
    total_pages: int

def extract_lesson_number(key: str) -> float:
    """Trailing lesson number of a key, or infinity when it has none."""
    match = LESSON_NUMBER_RE.search(key)
    return int(match.group(1)) if match else math.inf

def natural_key(key: str) -> Tuple[Tuple[int, int, str], ...]:
    """
    Case-insensitive, numeric-aware sort key: "Lesson2" < "lesson10".

    Digit runs sort before text at the same position.
    """
    parts = []
    # split() with a capturing group puts the digit runs at odd positions
    for position, chunk in enumerate(_CHUNK_RE.split(key.casefold())):
        if not chunk:
            continue
        if position % 2:
            parts.append((0, int(chunk), ""))
        else:
            parts.append((1, 0, chunk))
    return tuple(parts)

def list_lessons(index: RepositoryIndex, subject_prefix: Optional[str] = None) -> List[LessonSummary]:
    records = index.records()
    if subject_prefix:
        prefix = f"{subject_prefix}-"
        records = (record for record in records if record.key.startswith(prefix))

    ordered = sorted(records, key=lambda record: (extract_lesson_number(record.key), natural_key(record.key)))
    return [
        LessonSummary(key=record.key, title=record.title or record.key, count=len(record.questions))
        for record in ordered
    ]

def paginate_lessons(index: RepositoryIndex, subject_prefix: Optional[str], page: int, page_size: int) -> LessonPage:
    result = paginate(list_lessons(index, subject_prefix), page, page_size)
    return LessonPage(
        lessons=result.items,
        total_lessons=result.total,
        page=result.page,
        page_size=result.page_size,
        total_pages=result.total_pages,
    )
