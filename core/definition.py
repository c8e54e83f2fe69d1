#!/usr/bin/env python3
"""
Typed document model for a Duden entry page.

A page is parsed into a :class:`Definition` holding a title and an ordered
list of :class:`Meaning` values. A meaning is either a single sense or a
sense split into lettered sub-senses. Everything stored in the model is
normalized text, so rendering never needs the original markup.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence

from bs4 import Tag

from . import selectors
from .errors import EmptySense, MissingTitle, NoMeanings, ParseError
from .markup import select, select_one, text_fragments
from .text_normalizer import normalize

logger = logging.getLogger(__name__)

BOLD = "\x1b[1m"
RESET = "\x1b[0m"
INDENT = "\t"


def _normalized_text(node: Tag) -> str:
    return normalize(text_fragments(node), strip_soft_hyphens=True)


def sub_sense_label(index: int) -> str:
    """Letter label for a 0-based sub-sense index: a..z, then aa, ab, ..."""
    if index < 0:
        raise ValueError(f"Sub-sense index must not be negative, got {index}")
    label = ""
    index += 1
    while index:
        index, remainder = divmod(index - 1, 26)
        label = chr(ord("a") + remainder) + label
    return label


@dataclass(frozen=True)
class SimpleMeaning:
    """A single sense with optional examples"""
    text: str
    examples: Optional[Sequence[str]] = None
    # Reserved for usage labels ("umgangssprachlich", ...); never filled yet
    usage: Optional[str] = None

    @classmethod
    def parse(cls, node: Tag) -> "SimpleMeaning":
        text_node = select_one(node, selectors.MEANING_TEXT)
        if text_node is None:
            raise EmptySense(f"Sense <{node.name} id={node.get('id')!r}> has no sense text")

        examples = None
        note = select_one(node, selectors.EXAMPLES_NOTE)
        if note is not None:
            # A note without list items carries nothing to show
            examples = tuple(_normalized_text(item) for item in select(note, selectors.NOTE_ITEMS)) or None

        text = _normalized_text(text_node)
        if not text:
            raise EmptySense(f"Sense <{node.name} id={node.get('id')!r}> has blank sense text")
        return cls(text=text, examples=examples)

    def render(self, depth: int, label: str) -> List[str]:
        """Render this sense at indentation ``depth`` prefixed by ``label)``."""
        lines = [f"{INDENT * depth}{label}) {self.text}"]
        if self.examples is not None:
            heading = "Beispiel" if len(self.examples) == 1 else "Beispiele"
            lines.append(f"{INDENT * (depth + 1)}{heading}:")
            for example in self.examples:
                lines.append(f"{INDENT * (depth + 2)}- {example}")
        return lines


class MeaningKind(Enum):
    SIMPLE = "simple"
    COMPLEX = "complex"


@dataclass(frozen=True)
class Meaning:
    """One numbered sense: either ``SIMPLE`` or ``COMPLEX`` with sub-senses.

    Use :meth:`simple` and :meth:`complex` to construct values; exactly one of
    ``sense`` and ``sub_senses`` is populated depending on ``kind``.
    """
    kind: MeaningKind
    sense: Optional[SimpleMeaning] = None
    sub_senses: Sequence[SimpleMeaning] = field(default_factory=tuple)

    def __post_init__(self):
        if self.kind is MeaningKind.SIMPLE:
            if self.sense is None or self.sub_senses:
                raise ValueError("A simple meaning carries exactly one sense and no sub-senses")
        elif self.kind is MeaningKind.COMPLEX:
            if self.sense is not None:
                raise ValueError("A complex meaning carries its text in sub-senses only")
            if not self.sub_senses:
                raise ValueError("A complex meaning needs at least one sub-sense")

    @classmethod
    def simple(cls, sense: SimpleMeaning) -> "Meaning":
        return cls(kind=MeaningKind.SIMPLE, sense=sense)

    @classmethod
    def complex(cls, sub_senses: Sequence[SimpleMeaning]) -> "Meaning":
        return cls(kind=MeaningKind.COMPLEX, sub_senses=tuple(sub_senses))

    @property
    def is_complex(self) -> bool:
        return self.kind is MeaningKind.COMPLEX

    @classmethod
    def parse(cls, node: Tag) -> "Meaning":
        sub_nodes = select(node, selectors.SUB_MEANINGS)
        if sub_nodes:
            return cls.complex([SimpleMeaning.parse(sub_node) for sub_node in sub_nodes])
        return cls.simple(SimpleMeaning.parse(node))

    def render(self, number: int) -> List[str]:
        if self.kind is MeaningKind.SIMPLE:
            return self.sense.render(0, str(number))

        lines = [f"{number})"]
        for position, sub_sense in enumerate(self.sub_senses):
            lines.extend(sub_sense.render(1, sub_sense_label(position)))
        return lines


@dataclass(frozen=True)
class Definition:
    """A parsed dictionary entry."""
    title: str
    meanings: Sequence[Meaning]

    @classmethod
    def parse(cls, root: Tag) -> "Definition":
        """Extract a definition from a parsed entry page.

        Raises :class:`MissingTitle`, :class:`EmptySense` or
        :class:`NoMeanings`; a partial definition is never returned.
        """
        title_node = select_one(root, selectors.TITLE)
        if title_node is None:
            raise MissingTitle("Page has no headword title")
        title = _normalized_text(title_node)
        if not title:
            raise MissingTitle("Page title is blank")

        meanings = [Meaning.parse(node) for node in select(root, selectors.MEANINGS)]

        if not meanings:
            paragraph = select_one(root, selectors.SINGLE_MEANING)
            text = _normalized_text(paragraph) if paragraph is not None else ""
            if not text:
                raise NoMeanings(f"No meanings found for '{title}'")
            logger.debug(f"'{title}' uses the single meaning layout")
            meanings = [Meaning.simple(SimpleMeaning(text=text))]

        logger.debug(f"Parsed '{title}' with {len(meanings)} meanings")
        return cls(title=title, meanings=tuple(meanings))

    def render(self) -> str:
        lines = [f"{BOLD}{self.title}{RESET}", ""]
        for number, meaning in enumerate(self.meanings, start=1):
            if number > 1:
                lines.append("")
            lines.extend(meaning.render(number))
        return "\n".join(lines) + "\n"


@dataclass(frozen=True)
class AttributeTuple:
    """Key/value attribute block such as a usage domain label.

    The value stays a markup subtree and is rendered to text on demand.
    """
    key: str
    value: Tag

    @classmethod
    def parse(cls, node: Tag) -> "AttributeTuple":
        key_node = select_one(node, selectors.TUPLE_KEY)
        value_node = select_one(node, selectors.TUPLE_VALUE)
        if key_node is None or value_node is None:
            raise ParseError("Attribute block needs both a key and a value")
        return cls(key=_normalized_text(key_node), value=value_node)

    def value_text(self) -> str:
        return _normalized_text(self.value)

    def render(self) -> str:
        return f"{self.key}: {self.value_text()}"


def parse_attribute_tuples(root: Tag) -> List[AttributeTuple]:
    """Every key/value block on a page, in document order."""
    return [AttributeTuple.parse(node) for node in select(root, selectors.TUPLE)]
