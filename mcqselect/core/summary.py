"""
Tabular summary of selections handed to the comparison stage
"""

import logging
from collections.abc import Sequence
from pathlib import Path

import pandas as pd

from .selection import StructureSelection

logger = logging.getLogger(__name__)

SUMMARY_COLUMNS = ["role", "name", "fragment", "span", "residues", "sequence"]


def summarize_selections(
    target: StructureSelection, models: Sequence[StructureSelection]
) -> pd.DataFrame:
    """
    One row per compact fragment of the target and of every model.

    Args:
        target: Selection made on the target structure
        models: Selections made on the model structures, in batch order

    Returns:
        DataFrame with SUMMARY_COLUMNS
    """
    rows = []
    for role, selection in [("target", target), *(("model", model) for model in models)]:
        for fragment in selection.fragments:
            rows.append(
                {
                    "role": role,
                    "name": selection.name,
                    "fragment": fragment.name,
                    "span": fragment.span,
                    "residues": len(fragment),
                    "sequence": fragment.sequence,
                }
            )
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def save_summary_csv(summary: pd.DataFrame, output_path: Path) -> None:
    """Save the selection summary to CSV, creating parent directories."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    summary.to_csv(output_path, index=False)
    logger.info("Saved selection summary with %d fragments to %s", len(summary), output_path)
