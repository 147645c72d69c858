"""
Batch selection of target and model structures
"""

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from .io import StructureHandle, load_structure
from .naming import build_name_map, model_name
from .selection import SelectionDirective, StructureSelection, select

logger = logging.getLogger(__name__)

Loader = Callable[[Path], StructureHandle]


def _select_file(
    path: str | Path,
    directive: SelectionDirective,
    loader: Loader,
    name: str | None = None,
) -> StructureSelection:
    handle = loader(Path(path))
    if not name or not name.strip():
        name = model_name(path, handle)
    selection = select(handle, name, directive)
    logger.info(
        "Selected %d residues in %d fragments from %s as '%s'",
        selection.residue_count,
        selection.fragment_count,
        path,
        name,
    )
    return selection


def select_target(
    target_path: str | Path,
    directive: SelectionDirective,
    loader: Loader = load_structure,
) -> StructureSelection:
    """Load the target structure and make a selection on it."""
    return _select_file(target_path, directive, loader)


def select_model(
    model_path: str | Path,
    directive: SelectionDirective,
    loader: Loader = load_structure,
) -> StructureSelection:
    """Load a single model structure and make a selection on it."""
    return _select_file(model_path, directive, loader)


def select_models(
    model_paths: Sequence[str],
    directive: SelectionDirective,
    names_csv: str | None = None,
    loader: Loader = load_structure,
    max_workers: int = 1,
) -> list[StructureSelection]:
    """
    Load every model structure and make a selection on each of them.

    Args:
        model_paths: Model file paths in command-line order
        directive: Selection directive shared by all models
        names_csv: Optional comma-separated display names, one per model
        loader: Function loading a structure file
        max_workers: Number of threads loading models concurrently

    Returns:
        Selections in the order of model_paths

    Raises:
        SelectionPipelineError: From the first model that fails; no partial result
    """
    path_to_name = build_name_map(model_paths, names_csv)

    def select_one(path: str) -> StructureSelection:
        return _select_file(path, directive, loader, path_to_name.get(str(path)))

    if max_workers <= 1 or len(model_paths) <= 1:
        return [select_one(path) for path in model_paths]

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        # map yields in submission order and re-raises the first failure
        return list(executor.map(select_one, model_paths))
