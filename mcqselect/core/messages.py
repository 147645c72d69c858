"""
User-facing message templates for selection and naming problems
"""

from enum import Enum


class MessageKind(Enum):
    """Kinds of errors and warnings reported by the selection core."""

    LOAD_FAILED = "load_failed"
    NO_MODELS = "no_models"
    MORE_THAN_ONE_MODEL = "more_than_one_model"
    NAME_COUNT_MISMATCH = "name_count_mismatch"
    QUERY_SYNTAX = "query_syntax"
    QUERY_RANGE = "query_range"
    EMPTY_SELECTION = "empty_selection"
    EMPTY_FRAGMENT = "empty_fragment"
    INVALID_ANGLE = "invalid_angle"
    SELECTION_QUERY_SYNTAX = "selection_query_syntax"


MESSAGE_TEMPLATES = {
    MessageKind.LOAD_FAILED: "Failed to load structure from file: {path} ({reason})",
    MessageKind.NO_MODELS: "No models found in the file: {path}",
    MessageKind.MORE_THAN_ONE_MODEL: (
        "More than 1 model found in {path} ({count} models), only the first one will be used"
    ),
    MessageKind.NAME_COUNT_MISMATCH: (
        "Number of model names ({names}) is different than number of models ({models})"
    ),
    MessageKind.QUERY_SYNTAX: "Invalid selection query segment '{segment}' in: {query}",
    MessageKind.QUERY_RANGE: (
        "Selection query segment '{segment}' has a start residue after its end residue"
    ),
    MessageKind.EMPTY_SELECTION: "Selection '{name}' does not match any residue ({detail})",
    MessageKind.EMPTY_FRAGMENT: "Compact fragment '{name}' must contain at least one residue",
    MessageKind.INVALID_ANGLE: "Invalid torsion angle type '{angle}', select from: {valid}",
    MessageKind.SELECTION_QUERY_SYNTAX: (
        "Selection query syntax: an asterisk '*' treats all residues in the order of "
        "appearance as a single fragment, an empty query divides the structure "
        "automatically into compact fragments. Otherwise give comma-separated segments "
        "CHAIN, CHAIN:NUMBER or CHAIN:NUMBER-NUMBER (insertion codes may follow numbers), "
        "e.g. A:1-20,B:5A-10"
    ),
}


def format_message(kind: MessageKind, **fields) -> str:
    """Render the template for a message kind with the given fields."""
    return MESSAGE_TEMPLATES[kind].format(**fields)
