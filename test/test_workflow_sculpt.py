"""Test the analysis and renormalization of complete basis set files."""

from __future__ import annotations

import logging
from decimal import Decimal
from pathlib import Path

import pytest
from assertionlib import assertion

from basissculpt import workflow_sculpt
from basissculpt._logger import logger, report_logger
from basissculpt.normalization import Strategy
from basissculpt.parsers import expand_block, fortran_number, parse_basis_file
from basissculpt.workflows import validate_input

from .utilsTest import PATH_TEST

INPUT = PATH_TEST / "sto-3g.gbs"


def run(**kwargs):
    settings = validate_input({"input": INPUT, "threshold": "1e-12", **kwargs})
    return workflow_sculpt(settings)


def test_analysis_only(tmp_path: Path) -> None:
    """Check that nothing is written without ``normalize``."""
    output = tmp_path / "out.gbs"
    atoms = run(output=output)

    assertion.eq([atom.label for atom in atoms], ["H     0", "C     0"])
    assertion.eq(output.exists(), False)

    h, c = atoms
    (block,) = h.blocks
    (subshell,) = block.subshells
    assertion.eq(subshell.letter, "S")
    assertion.is_(subshell.normalization, None)
    assertion.len_eq(subshell.contributions.records, 3)
    assertion.lt(abs(subshell.contributions.full_norm - 1), Decimal("1e-6"))

    assertion.eq([b.shell_type for b in c.blocks], ["S", "SP"])
    assertion.eq([s.letter for s in c.blocks[1].subshells], ["S", "P"])
    assertion.len_eq(c.joined.records, 9)


def test_normalize(tmp_path: Path) -> None:
    """Check the renormalized basis set file."""
    output = tmp_path / "out.gbs"
    atoms = run(normalize=True, output=output, version_tag="v1", fixed_basis_name="STO-3G")

    for atom in atoms:
        for block in atom.blocks:
            for subshell in block.subshells:
                result = subshell.normalization
                assertion.lt(abs(result.norm - 1), Decimal("1e-7"))
                assertion.eq(result.contracted.exponents, subshell.contracted.exponents)

    c_s = atoms[1].blocks[1].subshells[0].normalization
    assertion.contains((Strategy.PROJECTION, Strategy.GOLDEN_SECTION), c_s.strategy)

    # The written file must be readable again
    lines = output.read_text().splitlines()
    assertion.eq(lines[0], "! STO-3G v1")
    assertion.eq(lines[1], "-H     0")
    written = parse_basis_file(output)
    assertion.eq([atom.label for atom in written], ["H     0", "C     0"])

    sp = expand_block(written[1].blocks[1])
    ref = atoms[1].blocks[1].subshells[1].normalization.contracted
    for (alpha, c), p in zip(sp["P"], ref):
        assertion.isclose(float(fortran_number(alpha)), float(p.alpha), rel_tol=1e-6)
        assertion.isclose(float(fortran_number(c)), float(p.coefficient), rel_tol=1e-6)


def test_stdout(capsys: pytest.CaptureFixture[str]) -> None:
    """Check that the basis set is written to stdout without an output file."""
    run(normalize=True, output_gbs_format=False, output_threshold=1e-6)
    out = capsys.readouterr().out.splitlines()
    assertion.contains(out, "H     0")
    assertion.contains(out, "****")
    assertion.contains(out, "SP 3   1.00")
    assertion.contains(out, "0.342525D+01   0.154329D+00")


def test_log_and_report(tmp_path: Path) -> None:
    """Check the content of the log and the report files."""
    log = tmp_path / "run.log"
    report = tmp_path / "run.report"
    run(log=log, report=report, version_tag="v1", normalize=True, output=tmp_path / "out.gbs")

    report_text = report.read_text()
    assertion.contains(report_text, "Version tag: v1")
    assertion.contains(report_text, "Atom: C     0")
    assertion.contains(report_text, "Full norm:")
    assertion.eq(report_text.count("Rem. \t alfa"), 6)

    log_text = log.read_text()
    assertion.contains(log_text, "Selected math precision: 12 digits")
    assertion.contains(log_text, "Removed # 1 (alfa = 3.4252509140)")
    assertion.contains(log_text, "Partial norm without primitive #1:")
    assertion.contains(log_text, "Full norm after normalization:")
    assertion.not_contains(log_text, "Rem. \t alfa")

    # The file handlers are removed after the run
    assertion.eq([h for h in logger.handlers if isinstance(h, logging.FileHandler)], [])
    assertion.eq([h for h in report_logger.handlers if isinstance(h, logging.FileHandler)], [])


def test_verbose(caplog: pytest.LogCaptureFixture) -> None:
    """Check the warnings about bare atom headers."""
    settings = validate_input({
        "input": PATH_TEST / "gen_input.gbs", "threshold": "1e-10",
        "verbose": True, "normalize": True,
    })
    with caplog.at_level(logging.INFO, logger="basissculpt"):
        atoms = workflow_sculpt(settings)

    assertion.len_eq(atoms, 2)
    assertion.contains(caplog.text, "does not fit the GBS format")
    assertion.contains(caplog.text, "Line 1> H     0")
    assertion.contains(caplog.text, "Full numbers:")
    assertion.contains(caplog.text, "Only one primitive - nothing to reduce.")
    assertion.is_(atoms[1].blocks[0].subshells[0].contributions.full_norm, None)


@pytest.mark.parametrize("key,msg", [
    ("output", "Cannot open output file"),
    ("log", "Cannot open log file"),
    ("report", "Cannot open report file"),
])
def test_unwritable_file(tmp_path: Path, caplog: pytest.LogCaptureFixture, key: str, msg: str) -> None:
    """Check that files in missing directories raise after logging their path."""
    path = tmp_path / "missing" / "file.txt"
    with caplog.at_level(logging.ERROR, logger="basissculpt"):
        with pytest.raises(OSError):
            run(normalize=True, **{key: path})
    assertion.contains(caplog.text, f"{msg}: {path}")
