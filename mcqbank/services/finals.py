# mcqbank/services/finals.py
import math
import random
from typing import Dict, List, Mapping

from pydantic import BaseModel

from mcqbank.models.question import Question
from mcqbank.services.pools import resolve_all, subject_pool
from mcqbank.services.repository import RepositoryIndex
from mcqbank.services.sampler import shuffle
from mcqbank.utils.logger import logger

class FinalsSet(BaseModel):
    items: List[Question]
    requested: int
    delivered: int
    ratio: Dict[str, float]

def compose_finals(index: RepositoryIndex, ratios: Mapping[str, float], count: int, rng: random.Random) -> FinalsSet:
    """
    Builds a stratified "finals" set.

    Each subject contributes ``floor(count * ratio)`` shuffled questions, in the
    order the ratios are given. Any shortfall is then filled from a shuffle of
    the whole index, skipping questions already chosen. If the index runs out
    the set is simply shorter than requested.
    """
    if count < 1:
        raise ValueError(f"count must be >= 1, got {count}")
    for subject, ratio in ratios.items():
        if not 0 < ratio <= 1:
            raise ValueError(f"ratio for '{subject}' must be in (0, 1], got {ratio}")

    result: List[Question] = []
    for subject, ratio in ratios.items():
        quota = math.floor(count * ratio)
        stratum = shuffle(subject_pool(index, subject), rng)[:quota]
        if len(stratum) < quota:
            logger.debug(f"Finals: subject '{subject}' has only {len(stratum)} of {quota} requested questions.")
        result.extend(stratum)

    # Ratios summing past 1 can overshoot; later strata give way.
    del result[count:]

    if len(result) < count:
        # Question equality is by content; identical items in different lessons stay distinct.
        chosen = {id(question) for question in result}
        for question in shuffle(resolve_all(index), rng):
            if len(result) >= count:
                break
            if id(question) not in chosen:
                chosen.add(id(question))
                result.append(question)

    return FinalsSet(items=result, requested=count, delivered=len(result), ratio=dict(ratios))
