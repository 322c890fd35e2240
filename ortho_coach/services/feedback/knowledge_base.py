"""
Knowledge Base Module

This module holds the topic → expected-keyword table used for content scoring.
The table is an explicit value built once at start-up and handed to the
heuristic engine, so tests and deployments can substitute their own table.

The module contains:
- KeywordTopic: An immutable topic label with its ordered keyword list
- KnowledgeBase: An immutable, ordered collection of topics
- load_knowledge_base: Builds the table from a JSON file or the reference defaults

Dependencies:
- json: For reading keyword tables from disk.
- loguru: For logging which table was loaded.
- ortho_coach.constants.keyword_table: For the reference table.

Author: @kcaparas1630
"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Mapping, Optional, Sequence, Tuple
from loguru import logger
from ortho_coach.constants.keyword_table import DEFAULT_KEYWORD_TABLE
from ortho_coach.errors.exceptions import KnowledgeBaseError


@dataclass(frozen=True)
class KeywordTopic:
    """A clinical topic and the keywords a complete answer is expected to mention."""
    label: str
    keywords: Tuple[str, ...]

    def matches(self, question: str) -> bool:
        """Check whether the topic label appears in the (lower-cased) question."""
        return self.label.lower() in question


def _check_distinct(label: str, keywords: Sequence[str]) -> None:
    # A keyword inside another would be counted as a hit whenever the longer one is
    lowered = [k.lower() for k in keywords]
    for i, keyword in enumerate(lowered):
        for j, other in enumerate(lowered):
            if i != j and keyword in other:
                raise KnowledgeBaseError(
                    f"Keyword '{keywords[i]}' of topic '{label}' is contained in '{keywords[j]}'"
                )


@dataclass(frozen=True)
class KnowledgeBase:
    topics: Tuple[KeywordTopic, ...]

    @classmethod
    def from_mapping(cls, table: Mapping[str, Iterable[str]]) -> "KnowledgeBase":
        """
        Build a knowledge base from a {label: [keywords]} mapping.

        Raises:
            KnowledgeBaseError: If a label or keyword is blank, a keyword list is not a
                list of strings, or one keyword of a topic contains another
        """
        topics: List[KeywordTopic] = []
        for label, keywords in table.items():
            if not isinstance(label, str) or not label.strip():
                raise KnowledgeBaseError("Topic labels must be non-empty strings")
            if not isinstance(keywords, (list, tuple)) or not all(isinstance(k, str) for k in keywords):
                raise KnowledgeBaseError(f"Keywords for topic '{label}' must be a list of strings")
            if any(not k.strip() for k in keywords):
                raise KnowledgeBaseError(f"Keywords for topic '{label}' must be non-empty strings")
            _check_distinct(label, keywords)
            topics.append(KeywordTopic(label=label.strip(), keywords=tuple(keywords)))
        return cls(topics=tuple(topics))

    @classmethod
    def default(cls) -> "KnowledgeBase":
        return cls.from_mapping(DEFAULT_KEYWORD_TABLE)

    def matching_topics(self, question: str) -> List[KeywordTopic]:
        """Return every topic whose label is contained in the question, in table order."""
        lowered = question.lower()
        return [topic for topic in self.topics if topic.matches(lowered)]

    @property
    def labels(self) -> List[str]:
        return [topic.label for topic in self.topics]

    def __len__(self) -> int:
        return len(self.topics)


def load_knowledge_base(path: Optional[str] = None) -> KnowledgeBase:
    """
    Load the keyword table used by the heuristic engine.

    Args:
        path (Optional[str]): JSON file holding a {label: [keywords]} object.
            When omitted the reference table is used.

    Returns:
        KnowledgeBase: The loaded table

    Raises:
        KnowledgeBaseError: If the file cannot be read or has the wrong shape
    """
    if not path:
        knowledge_base = KnowledgeBase.default()
        logger.info(f"Loaded reference keyword table with {len(knowledge_base)} topics")
        return knowledge_base

    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Failed to read keyword table from {path}: {e}")
        raise KnowledgeBaseError(f"Failed to read keyword table from {path}: {e}") from e

    if not isinstance(raw, dict):
        raise KnowledgeBaseError(f"Keyword table in {path} must be a JSON object")

    knowledge_base = KnowledgeBase.from_mapping(raw)
    logger.info(f"Loaded keyword table from {path} with {len(knowledge_base)} topics")
    return knowledge_base
