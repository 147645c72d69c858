"""Core modules for structure loading, naming and selection."""

from mcqselect.core.angles import TorsionAngleType, main_angles, parse_angles
from mcqselect.core.errors import (
    AngleTypeError,
    EmptySelectionError,
    SelectionPipelineError,
    SelectionQueryError,
    StructureLoadError,
)
from mcqselect.core.io import StructureHandle, load_structure
from mcqselect.core.naming import build_name_map, model_name
from mcqselect.core.pipeline import select_model, select_models, select_target
from mcqselect.core.query import SelectionQuery
from mcqselect.core.selection import (
    CompactFragment,
    SelectionDirective,
    StructureSelection,
    create_selection,
    select,
)

__all__ = [
    "AngleTypeError",
    "CompactFragment",
    "EmptySelectionError",
    "SelectionDirective",
    "SelectionPipelineError",
    "SelectionQuery",
    "SelectionQueryError",
    "StructureHandle",
    "StructureLoadError",
    "StructureSelection",
    "TorsionAngleType",
    "build_name_map",
    "create_selection",
    "load_structure",
    "main_angles",
    "model_name",
    "parse_angles",
    "select",
    "select_model",
    "select_models",
    "select_target",
]
