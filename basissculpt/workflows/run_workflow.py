#!/usr/bin/env python
"""Comman line interface to run BasisSculpt.

Usage:
    basissculpt --input def2svp.gbs --threshold 1e-8 --normalize --output def2svp_reduced.gbs
    basissculpt -c input.yml [--normalize ...]

Options given on the command line take precedence over those of the
YAML input file.

"""

from __future__ import annotations

import argparse
import os
from typing import Any, Sequence

from .._logger import logger
from .._version import __version__
from ..common import CITATION, LICENSE
from ..messages import get_msg
from .input_validation import process_input, validate_input
from .workflow_sculpt import workflow_sculpt

msg = "basissculpt --input <input_file> --threshold <norm_tolerance> [options]"

parser = argparse.ArgumentParser(
    prog="basissculpt",
    usage=msg,
    description="BasisSculpt - Basis Set Reduction and Correction Tool",
)
parser.add_argument('-c', '--config', default=None,
                    help="Input file in YAML format")
parser.add_argument('-i', '--input', default=None,
                    help="Input basis set file (.gbs format)")
parser.add_argument('--threshold', default=None,
                    help="Maximum allowed deviation from the original norm (e.g., 1e-8)")
parser.add_argument('--normalize', action='store_true', default=None,
                    help="Enable post-analysis re-normalization")
parser.add_argument('--output', default=None,
                    help="File to write the resulting basis set if set 'normalize' (default: stdout)")
parser.add_argument('--output-gbs-format', default=None, choices=('yes', 'no'),
                    help="'yes' for the .gbs format with '-' atom headers, 'no' for plain blocks "
                         "suitable for Gaussian input (GEN) (default: yes)")
parser.add_argument('--output-threshold', default=None,
                    help="Write the basis set values as 0.xxxD+ee with the decimals of this threshold")
parser.add_argument('--log', default=None,
                    help="Write detailed diagnostic log to file")
parser.add_argument('--report', default=None,
                    help="Write summary report with norm loss and contributions")
parser.add_argument('--version-tag', default=None,
                    help="Custom tag to label this analysis")
parser.add_argument('--fixed-basis-name', default=None,
                    help="Basis set name label for output")
parser.add_argument('--verbose', action='store_true', default=None,
                    help="Enable verbose output")
parser.add_argument('--citation', action='store_true',
                    help="Display the recommended citation information and exit")
parser.add_argument('--license', action='store_true',
                    help="Display the license and exit")
parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")

#: Command line flags that map onto the keys of the YAML input
_SETTING_KEYS = (
    "input", "threshold", "normalize", "output", "output_gbs_format", "output_threshold",
    "log", "report", "version_tag", "fixed_basis_name", "verbose",
)


def get_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Collect the settings explicitly passed on the command line."""
    return {k: getattr(args, k) for k in _SETTING_KEYS if getattr(args, k) is not None}


def main(argv: None | Sequence[str] = None) -> None:
    """Parse the command line arguments and run workflow."""
    args = parser.parse_args(argv)
    if args.citation:
        print(CITATION.format(version=__version__))
        return None
    if args.license:
        print(LICENSE)
        return None

    overrides = get_overrides(args)
    if args.config is not None:
        settings = process_input(args.config, overrides)
        logger.info(f"Running BasisSculpt using: {os.path.abspath(args.config)}")
    elif "input" not in overrides:
        parser.error(get_msg("ERROR_FILE_ARGUMENT"))
    else:
        settings = validate_input(overrides)

    workflow_sculpt(settings)


if __name__ == "__main__":
    main()
