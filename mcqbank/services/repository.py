# mcqbank/services/repository.py
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from mcqbank.models.lesson import LessonRecord, SourceNode
from mcqbank.models.question import Question
from mcqbank.utils.logger import logger

class RepositoryIndex:
    """
    Read-only mapping from lesson key to LessonRecord.

    Built once by ``build_index`` and shared by every request; nothing mutates it
    afterwards, so concurrent readers need no locking.
    """

    def __init__(self, records: Mapping[str, LessonRecord]):
        self._records = MappingProxyType(dict(records))

    def get(self, key: str) -> Optional[LessonRecord]:
        return self._records.get(key)

    def records(self) -> Iterator[LessonRecord]:
        """Records in index iteration order."""
        return iter(self._records.values())

    def keys(self) -> List[str]:
        return list(self._records.keys())

    def __contains__(self, key: object) -> bool:
        return key in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[str]:
        return iter(self._records)

    def question_count(self) -> int:
        return sum(len(record.questions) for record in self._records.values())


def build_index(root: SourceNode) -> RepositoryIndex:
    """
    Flattens a source tree into a RepositoryIndex.

    Leaves directly under ``root`` keep their own name as key; a leaf inside a
    group is keyed ``<group>-<leaf>`` where ``<group>`` is its immediate parent.
    Later leaves overwrite earlier ones that flatten to the same key.
    """
    records: Dict[str, LessonRecord] = {}
    for subject, leaf in _iter_leaves(root, None):
        key = f"{subject}-{leaf.name}" if subject else leaf.name
        if key in records:
            logger.debug(f"Lesson key '{key}' defined more than once; keeping the later definition.")
        records[key] = _build_record(key, leaf)

    index = RepositoryIndex(records)
    logger.info(f"Built repository index with {len(index)} lessons and {index.question_count()} questions.")
    return index

def _iter_leaves(node: SourceNode, subject: Optional[str]) -> Iterator[Tuple[Optional[str], SourceNode]]:
    # Depth-first; a group tags only its direct leaf children.
    for child in node.children or []:
        if child.is_group:
            yield from _iter_leaves(child, child.name)
        else:
            yield subject, child

def _build_record(key: str, leaf: SourceNode) -> LessonRecord:
    if leaf.error is not None:
        logger.error(f"Failed to parse JSON file {leaf.path or key}: {leaf.error}")
        return LessonRecord(key=key, title=key)

    payload = leaf.payload
    if isinstance(payload, list):
        raw_questions, title = payload, key
    elif isinstance(payload, dict) and isinstance(payload.get("questions"), list):
        raw_questions, title = payload["questions"], payload.get("title") or key
    else:
        logger.warning(f"Lesson '{key}' has no question list, serving it empty.")
        return LessonRecord(key=key, title=key)

    return LessonRecord(key=key, title=str(title), questions=tuple(_parse_questions(key, raw_questions)))

def _parse_questions(key: str, raw_questions: List[Any]) -> Iterator[Question]:
    for position, raw in enumerate(raw_questions):
        if isinstance(raw, Question):
            yield raw
            continue
        if not isinstance(raw, dict):
            logger.error(f"Skipping question {position} in lesson '{key}': expected an object, got {type(raw).__name__}")
            continue
        # Untagged questions inherit the lesson they were filed under.
        yield Question.model_validate({"lesson": key, **raw})
