"""
Selection query parsing

A query is a comma-separated list of segments, each selecting residues of one
chain:

    A            whole chain A
    A:12         residue 12 of chain A
    A:1-20       residues 1 to 20 of chain A (inclusive)
    B:5A-10      insertion codes may follow residue numbers
    C:-3--1      residue numbers may be negative

Every segment becomes one compact fragment of the resulting selection.
"""

import re
from dataclasses import dataclass

from .errors import SelectionQueryError
from .messages import MessageKind
from .residues import ResidueRef

SEGMENT_PATTERN = re.compile(
    r"""
    ^(?P<chain>[A-Za-z0-9]+)
    (?::
        (?P<start>-?\d+)(?P<start_icode>[A-Za-z]?)
        (?:-(?P<end>-?\d+)(?P<end_icode>[A-Za-z]?))?
    )?$
    """,
    re.VERBOSE,
)


@dataclass(frozen=True)
class QuerySegment:
    """Residue range of a single chain; no bounds means the whole chain."""

    chain: str
    start: tuple[int, str] | None = None
    end: tuple[int, str] | None = None

    def matches(self, ref: ResidueRef) -> bool:
        if ref.chain_name != self.chain:
            return False
        if self.start is None or self.end is None:
            return True
        return self.start <= ref.key <= self.end

    def __str__(self) -> str:
        if self.start is None or self.end is None:
            return self.chain
        start = f"{self.start[0]}{self.start[1]}"
        if self.start == self.end:
            return f"{self.chain}:{start}"
        return f"{self.chain}:{start}-{self.end[0]}{self.end[1]}"


@dataclass(frozen=True)
class SelectionQuery:
    """Parsed selection query."""

    text: str
    segments: tuple[QuerySegment, ...]

    @classmethod
    def parse(cls, text: str) -> "SelectionQuery":
        """
        Parse a selection query.

        Raises:
            SelectionQueryError: If any segment is malformed
        """
        segments = []
        for raw_segment in text.split(","):
            segment = raw_segment.strip()
            match = SEGMENT_PATTERN.match(segment)
            if not match:
                raise SelectionQueryError(MessageKind.QUERY_SYNTAX, segment=segment, query=text)
            segments.append(_segment_from_match(match, segment))
        return cls(text=text, segments=tuple(segments))


def _segment_from_match(match: re.Match, segment: str) -> QuerySegment:
    chain = match.group("chain")
    if match.group("start") is None:
        return QuerySegment(chain=chain)

    start = (int(match.group("start")), match.group("start_icode"))
    if match.group("end") is None:
        return QuerySegment(chain=chain, start=start, end=start)

    end = (int(match.group("end")), match.group("end_icode"))
    if start > end:
        raise SelectionQueryError(MessageKind.QUERY_RANGE, segment=segment)
    return QuerySegment(chain=chain, start=start, end=end)
