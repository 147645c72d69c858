"""CLI scripts called from __main__.py"""

import argparse
import logging
import os
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from mcqselect.core.angles import TorsionAngleType, angle_names, main_angles
from mcqselect.core.messages import MessageKind, format_message


def setup_logging(verbose: int = 0) -> None:
    """Configure logging based on verbosity level.

    Args:
        verbose: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
    """
    if verbose == 0:
        level = logging.WARNING
    elif verbose == 1:
        level = logging.INFO
    else:  # verbose >= 2
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    # Set level specifically for our package
    logging.getLogger("mcqselect").setLevel(level)


def validate_file_path(input_path: str) -> Path:
    """Validate file_path and readability"""
    file_path = Path(input_path)
    checks = [
        (lambda: file_path.exists(), "Path does not exist"),
        (lambda: file_path.is_file(), "Not a valid file"),
        (lambda: os.access(file_path, os.R_OK), "No read permission"),
        (lambda: file_path.stat().st_size > 0, "File is empty"),
    ]
    for condition, error_message in checks:
        if not condition():
            raise argparse.ArgumentTypeError(f"File Validation Error: {error_message}: {input_path}")
    return file_path


def mcq_threshold(value: str) -> float:
    """Parse an MCQ threshold given in degrees."""
    try:
        threshold = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Not a number: {value}") from None
    if not 0.0 <= threshold <= 180.0:
        raise argparse.ArgumentTypeError(f"MCQ threshold must be within 0-180 degrees: {value}")
    return threshold


def positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"Expected a positive integer: {value}")
    return number


def get_version() -> str:
    """Get version from package metadata"""
    try:
        return version("MCQSelect")
    except PackageNotFoundError:
        return "0.0.1"  # Fallback for development


def arg_parser(argv: list[str] | None = None) -> argparse.Namespace:
    """Assemble command-line argument processing"""
    parser = argparse.ArgumentParser(
        prog="mcqselect",
        description="Select and name target and model structures for MCQ comparison",
        epilog=format_message(MessageKind.SELECTION_QUERY_SYNTAX),
    )

    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=get_version(),
        help="View MCQSelect version number",
    )
    parser.add_argument(
        "--verbose",
        action="count",
        default=0,
        help="Increase output verbosity (--verbose for INFO, --verbose --verbose for DEBUG)",
    )

    # Structure arguments
    parser.add_argument(
        "models",
        nargs="+",
        help="Paths to PDB or PDBx/mmCIF files of 3D RNA models",
    )
    parser.add_argument(
        "-t",
        "--target",
        required=True,
        type=validate_file_path,
        help="Path to PDB file of the native 3D RNA target",
    )
    parser.add_argument(
        "-v",
        "--mcq-threshold-value",
        required=True,
        type=mcq_threshold,
        help="Value of MCQ threshold in degrees",
    )

    # Selection options
    parser.add_argument(
        "-T",
        "--selection-target",
        default="",
        help="Selection query for native 3D RNA target",
    )
    parser.add_argument(
        "-M",
        "--selection-model",
        default="",
        help="Selection query for 3D RNA model",
    )
    parser.add_argument(
        "-a",
        "--angles",
        help=(
            "Torsion angle types (separated by comma without space), select from: "
            f"{angle_names(TorsionAngleType)}. Default is: {angle_names(main_angles())}"
        ),
    )
    parser.add_argument(
        "-n",
        "--names",
        help="Model names to be saved in output files (separated by comma without space)",
    )

    # Execution and output options
    parser.add_argument(
        "-w",
        "--workers",
        type=positive_int,
        default=1,
        help="Number of model files loaded concurrently (default: 1)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        help="Save a CSV summary of all selected fragments to this path",
    )

    args = parser.parse_args(argv)
    for model_path in args.models:
        try:
            validate_file_path(model_path)
        except argparse.ArgumentTypeError as e:
            parser.error(str(e))
    return args
