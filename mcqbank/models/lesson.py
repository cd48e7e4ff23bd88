# Data models for lesson records and the hierarchical source they are built from
from pydantic import BaseModel, ConfigDict
from typing import Any, List, Optional, Tuple

from mcqbank.models.question import Question

class LessonRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    key: str
    title: str
    questions: Tuple[Question, ...] = ()

class LessonSummary(BaseModel):
    key: str
    title: str
    count: int

class SourceNode(BaseModel):
    """
    One node of the question source tree handed over by a loader.

    A group carries ``children`` (possibly empty); a leaf carries either the
    decoded ``payload`` or the decode ``error`` message. ``path`` is only used
    in diagnostics.
    """
    name: str
    children: Optional[List["SourceNode"]] = None
    payload: Any = None
    error: Optional[str] = None
    path: Optional[str] = None

    @property
    def is_group(self) -> bool:
        return self.children is not None

SourceNode.model_rebuild()
