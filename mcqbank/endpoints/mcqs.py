# Endpoints serving question sets: paged by lesson/subject, random, and finals

# mcqbank/endpoints/mcqs.py
import random
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, ConfigDict, Field

from mcqbank.exceptions import MCQBankError
from mcqbank.models.question import Question
from mcqbank.services import pools, sampler
from mcqbank.services.finals import FinalsSet, compose_finals
from mcqbank.services.repository import RepositoryIndex
from mcqbank.utils.config import settings
from mcqbank.utils.dependencies import get_repository, get_rng
from mcqbank.utils.logger import logger

router = APIRouter()

class QuestionPage(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    items: List[Question]
    total: int
    page: int
    page_size: int = Field(alias="pageSize")
    total_pages: int = Field(alias="totalPages")

class RandomSet(BaseModel):
    items: List[Question]
    total: int
    requested: int
    delivered: int

@router.get("", response_model=QuestionPage)
async def get_mcqs(
    lesson: Optional[str] = None,
    subject: Optional[str] = None,
    page: int = 1,
    page_size: Optional[int] = Query(None, alias="pageSize"),
    count: Optional[int] = Query(None, description="Legacy page size, used only when pageSize is absent"),
    repository: RepositoryIndex = Depends(get_repository),
    rng: random.Random = Depends(get_rng),
):
    page = max(1, page)
    if page_size is not None:
        effective_page_size = max(1, page_size)
    elif count is not None:
        effective_page_size = max(1, count)
    else:
        effective_page_size = settings.default_page_size

    if not lesson and not subject:
        raise HTTPException(status_code=400, detail="Must provide lesson or subject")

    try:
        if lesson:
            pool = pools.resolve_by_lesson(repository, lesson)
        else:
            pool = pools.resolve_by_subject(repository, subject)
    except MCQBankError as e:
        logger.info(f"Rejected /mcqs request (lesson={lesson!r}, subject={subject!r}): {e}")
        raise HTTPException(status_code=400, detail=str(e))

    result = sampler.take_page(pool, page, effective_page_size, rng)
    return QuestionPage(
        items=result.items,
        total=result.total,
        page=result.page,
        page_size=result.page_size,
        total_pages=result.total_pages,
    )

@router.get("/random", response_model=RandomSet)
async def get_random_mcqs(
    subject: Optional[str] = Query(None, description="'pharmacology', 'pathology', 'both', or unset for all lessons"),
    count: int = settings.default_random_count,
    repository: RepositoryIndex = Depends(get_repository),
    rng: random.Random = Depends(get_rng),
):
    count = max(1, count)
    try:
        pool = pools.resolve_random_pool(repository, subject, settings.random_subjects)
    except MCQBankError as e:
        raise HTTPException(status_code=400, detail=str(e))

    items = sampler.take_random(pool, count, rng)
    return RandomSet(items=items, total=len(pool), requested=count, delivered=len(items))

@router.get("/finals", response_model=FinalsSet)
async def get_finals(
    count: int = settings.default_finals_count,
    repository: RepositoryIndex = Depends(get_repository),
    rng: random.Random = Depends(get_rng),
):
    finals = compose_finals(repository, settings.finals_ratio, max(1, count), rng)
    if finals.delivered < finals.requested:
        logger.info(f"Finals delivered {finals.delivered} of {finals.requested} requested questions.")
    return finals
