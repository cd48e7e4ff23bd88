# mcqbank/endpoints/lessons.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, ConfigDict, Field

from mcqbank.models.lesson import LessonSummary
from mcqbank.services.lessons import paginate_lessons
from mcqbank.services.repository import RepositoryIndex
from mcqbank.utils.config import settings
from mcqbank.utils.dependencies import get_repository

router = APIRouter()

class LessonCatalog(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    lessons: List[LessonSummary]
    total_lessons: int = Field(alias="totalLessons")
    page: int
    page_size: int = Field(alias="pageSize")
    total_pages: int = Field(alias="totalPages")

@router.get("", response_model=LessonCatalog)
async def get_lessons(
    subject: Optional[str] = Query(None, description="Subject prefix, e.g. 'pharmacology'"),
    page: int = 1,
    page_size: int = Query(settings.default_lessons_page_size, alias="pageSize"),
    repository: RepositoryIndex = Depends(get_repository),
):
    """Lists lessons in natural lesson order with their titles and question counts."""
    result = paginate_lessons(repository, subject or None, max(1, page), max(1, page_size))
    return LessonCatalog(
        lessons=result.lessons,
        total_lessons=result.total_lessons,
        page=result.page,
        page_size=result.page_size,
        total_pages=result.total_pages,
    )
