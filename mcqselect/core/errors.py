"""
Exceptions raised while loading structures and building selections
"""

from .messages import MessageKind, format_message


class SelectionPipelineError(ValueError):
    """
    Base error of the selection core.

    Carries the message kind and its fields so callers can inspect what went
    wrong; the text is only rendered when the error is shown.
    """

    def __init__(self, kind: MessageKind, **fields) -> None:
        self.kind = kind
        self.fields = fields
        super().__init__(format_message(kind, **fields))


class StructureLoadError(SelectionPipelineError):
    """File missing, unreadable, unparsable or without any model."""


class SelectionQueryError(SelectionPipelineError):
    """Malformed selection query text."""


class EmptySelectionError(SelectionPipelineError):
    """A selection or fragment would contain no residues."""


class AngleTypeError(SelectionPipelineError):
    """Unrecognized torsion angle type name."""
