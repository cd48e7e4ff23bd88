# mcqbank/services/pools.py
from typing import List, Optional, Sequence

from mcqbank.exceptions import InvalidLessonError, NoQuestionsForSubjectError
from mcqbank.models.question import Question
from mcqbank.services.repository import RepositoryIndex

BOTH_SUBJECTS = "both"

def resolve_by_lesson(index: RepositoryIndex, key: str) -> Sequence[Question]:
    """Returns the lesson's own question sequence, not a copy."""
    record = index.get(key)
    if record is None:
        raise InvalidLessonError(key)
    return record.questions

def subject_pool(index: RepositoryIndex, subject: str) -> List[Question]:
    """Questions of every lesson keyed ``<subject>-...``, in index order. May be empty."""
    prefix = f"{subject}-"
    return [
        question
        for record in index.records()
        if record.key.startswith(prefix)
        for question in record.questions
    ]

def resolve_by_subject(index: RepositoryIndex, subject: str) -> List[Question]:
    pool = subject_pool(index, subject)
    if not pool:
        raise NoQuestionsForSubjectError(subject)
    return pool

def resolve_all(index: RepositoryIndex) -> List[Question]:
    return [question for record in index.records() for question in record.questions]

def resolve_random_pool(index: RepositoryIndex, subject: Optional[str], known_subjects: Sequence[str]) -> List[Question]:
    """
    Pool selection for random practice.

    A known subject selects that subject, ``"both"`` combines all known subjects
    in their configured order, and anything else (including no subject) selects
    every question in the index.
    """
    if subject in known_subjects:
        pool = subject_pool(index, subject)
    elif subject == BOTH_SUBJECTS:
        pool = [question for name in known_subjects for question in subject_pool(index, name)]
    else:
        pool = resolve_all(index)

    if not pool:
        raise NoQuestionsForSubjectError(subject)
    return pool
