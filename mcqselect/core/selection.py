"""
Selections of compact fragments made on loaded structures

A selection directive decides how a structure is divided:
- "*": all residues in the order of appearance form a single fragment
- empty or blank: automatic division into compact fragments
- anything else: a selection query (see query.py)
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from .errors import EmptySelectionError
from .io import StructureHandle
from .messages import MessageKind
from .query import SelectionQuery
from .residues import ResidueRef, are_connected, fragment_sequence, is_polymer_residue

logger = logging.getLogger(__name__)

WILDCARD = "*"


class DirectiveKind(Enum):
    WILDCARD = "wildcard"
    AUTO = "auto"
    QUERY = "query"


@dataclass(frozen=True)
class SelectionDirective:
    """How to divide a structure into fragments, shared by a whole batch."""

    kind: DirectiveKind
    query: str = ""

    @classmethod
    def parse(cls, text: str | None) -> "SelectionDirective":
        """Classify raw option text: exactly '*', blank/None, or a query kept verbatim."""
        if text == WILDCARD:
            return cls(DirectiveKind.WILDCARD)
        if text is None or not text.strip():
            return cls(DirectiveKind.AUTO)
        return cls(DirectiveKind.QUERY, text)


@dataclass(frozen=True)
class CompactFragment:
    """Ordered residues treated as one contiguous comparison unit."""

    name: str
    residues: tuple[ResidueRef, ...]

    def __post_init__(self) -> None:
        if not self.residues:
            raise EmptySelectionError(MessageKind.EMPTY_FRAGMENT, name=self.name)

    def __len__(self) -> int:
        return len(self.residues)

    @property
    def sequence(self) -> str:
        return fragment_sequence(list(self.residues))

    @property
    def span(self) -> str:
        return span_label(self.residues)


@dataclass(frozen=True)
class StructureSelection:
    """Named set of compact fragments drawn from one structure."""

    name: str
    fragments: tuple[CompactFragment, ...]

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Selection name must not be blank")
        if not self.fragments:
            raise EmptySelectionError(
                MessageKind.EMPTY_SELECTION, name=self.name, detail="no fragments"
            )

    @property
    def fragment_count(self) -> int:
        return len(self.fragments)

    @property
    def residue_count(self) -> int:
        return sum(len(fragment) for fragment in self.fragments)


def split_compact_fragments(residues: list[ResidueRef]) -> list[list[ResidueRef]]:
    """Divide residues into runs of backbone-connected neighbours."""
    runs: list[list[ResidueRef]] = []
    for ref in residues:
        if runs and are_connected(runs[-1][-1], ref):
            runs[-1].append(ref)
        else:
            runs.append([ref])
    return runs


def span_label(residues: Sequence[ResidueRef]) -> str:
    """First and last residue, e.g. 'A:1-25' or 'A:90-B:3' across chains."""
    first, last = residues[0], residues[-1]
    if first.chain_name == last.chain_name:
        return f"{first.label}-{last.number}{last.icode}"
    return f"{first.label}-{last.label}"


def create_selection(
    name: str, handle: StructureHandle, query: SelectionQuery | None = None
) -> StructureSelection:
    """
    Build a selection on a structure.

    Without a query, polymer residues (amino acids and nucleotides) are
    divided into compact fragments at chain breaks and missing backbone
    links. With a query, every query segment yields one fragment.

    Raises:
        EmptySelectionError: If nothing is selected or a query segment matches no residue
    """
    residues = handle.residues()

    if query is None:
        polymer = [ref for ref in residues if is_polymer_residue(ref.residue)]
        if not polymer:
            raise EmptySelectionError(
                MessageKind.EMPTY_SELECTION, name=name, detail="no polymer residues"
            )
        fragments = [
            CompactFragment(span_label(run), tuple(run)) for run in split_compact_fragments(polymer)
        ]
        logger.debug("%s divided into %d compact fragments", name, len(fragments))
        return StructureSelection(name, tuple(fragments))

    fragments = []
    for segment in query.segments:
        matched = [ref for ref in residues if segment.matches(ref)]
        if not matched:
            raise EmptySelectionError(
                MessageKind.EMPTY_SELECTION, name=name, detail=f"segment {segment}"
            )
        fragments.append(CompactFragment(str(segment), tuple(matched)))
    return StructureSelection(name, tuple(fragments))


def select(
    handle: StructureHandle, name: str, directive: SelectionDirective
) -> StructureSelection:
    """
    Make a selection on a structure according to a directive.

    Args:
        handle: Loaded structure
        name: Name of the structure to be displayed in final results
        directive: Wildcard, automatic or query directive

    Returns:
        StructureSelection named after the structure

    Raises:
        SelectionQueryError: If the query text is malformed
        EmptySelectionError: If the selection would contain no residues
    """
    if directive.kind is DirectiveKind.WILDCARD:
        fragment = CompactFragment(name, tuple(handle.residues()))
        return StructureSelection(name, (fragment,))
    if directive.kind is DirectiveKind.AUTO:
        return create_selection(name, handle)
    return create_selection(name, handle, SelectionQuery.parse(directive.query))
