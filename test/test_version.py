import pytest
from packaging.version import Version
from assertionlib import assertion

import basissculpt


def test_version() -> None:
    """Check that the BasisSculpt version is PEP 440 compliant."""
    assertion.assert_(Version, basissculpt.__version__)


def test_version_info() -> None:
    version = Version(basissculpt.__version__)
    assertion.eq(tuple(basissculpt.version_info), version.release[:3])


def test_dev_version(is_release: bool) -> None:
    if not is_release:
        pytest.skip("Requires a BasisSculpt release")
        return None
    version = Version(basissculpt.__version__)
    assertion.not_(version.is_devrelease)
