# Data model for questions
from pydantic import BaseModel, ConfigDict
from typing import Any

class Question(BaseModel):
    # Field values are served back without type checks, and extra fields
    # (explanations, ids, ...) are kept.
    model_config = ConfigDict(extra="allow", frozen=True)

    question: Any = None
    options: Any = None
    answerIndex: Any = None
    lesson: Any = None
