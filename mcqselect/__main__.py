#!/usr/bin/env python3

"""Entry point for mcqselect"""

import logging
import sys

from mcqselect.cli import arg_parser, setup_logging
from mcqselect.core.angles import angle_names, parse_angles
from mcqselect.core.errors import SelectionPipelineError
from mcqselect.core.pipeline import select_models, select_target
from mcqselect.core.selection import SelectionDirective, StructureSelection
from mcqselect.core.summary import save_summary_csv, summarize_selections

logger = logging.getLogger("mcqselect")


def print_selection(role: str, selection: StructureSelection) -> None:
    print(
        f"{role:<7} {selection.name}: {selection.fragment_count} fragment(s), "
        f"{selection.residue_count} residues"
    )
    for fragment in selection.fragments:
        print(f"          {fragment.span:<20} {len(fragment):>5}  {fragment.sequence}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for structure selection."""
    args = arg_parser(argv)
    setup_logging(args.verbose)

    try:
        angles = parse_angles(args.angles)
        target = select_target(args.target, SelectionDirective.parse(args.selection_target))
        models = select_models(
            args.models,
            SelectionDirective.parse(args.selection_model),
            args.names,
            max_workers=args.workers,
        )
    except SelectionPipelineError as e:
        logger.debug("Selection failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("=== MCQ INPUT ===")
    print(f"MCQ threshold:  {args.mcq_threshold_value:.2f}°")
    print(f"Angle types:    {angle_names(angles)}")

    print("\n=== SELECTIONS ===")
    print_selection("target", target)
    for model in models:
        print_selection("model", model)

    if args.output:
        summary = summarize_selections(target, models)
        save_summary_csv(summary, args.output)
        print(f"\nSelection summary saved to: {args.output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
