"""Type aliases and helpers shared by the BasisSculpt modules.

Index
-----
.. currentmodule:: basissculpt.common
.. autosummary::
    DictConfig
    CITATION
    LICENSE

API
---
.. autoclass:: DictConfig
.. autodata:: CITATION
.. autodata:: LICENSE

"""

from __future__ import annotations

__all__ = ['DictConfig', 'PathLike', 'UniqueSafeLoader', 'CITATION', 'LICENSE']

import os
from typing import Any, Dict, Union

from qmflows.yaml_utils import UniqueSafeLoader

PathLike = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]

#: The reference to cite when publishing results obtained with BasisSculpt.
CITATION = """\
BasisSculpt - Basis Set Reduction and Correction Tool
Version: {version}

If you use this tool in a scientific publication, please cite as:

    Macernis, M.,
    Component-wise AO basis reduction: norm loss, negative contribution normalization, \
and functional implications.
    Phys. Chem. Chem. Phys. 2025, 27 (27), 14555-14564.
    https://doi.org/10.1039/D5CP01681A
"""

#: The license BasisSculpt is distributed under.
LICENSE = """\
BSD 3-Clause License

Copyright (c) 2025, M. Macernis
All rights reserved.

Redistribution and use in source and binary forms, with or without
modification, are permitted provided that the following conditions are met:

1. Redistributions of source code must retain the above copyright notice,
   this list of conditions and the following disclaimer.

2. Redistributions in binary form must reproduce the above copyright notice,
   this list of conditions and the following disclaimer in the documentation
   and/or other materials provided with the distribution.

3. Neither the name of the copyright holder nor the names of its contributors
   may be used to endorse or promote products derived from this software
   without specific prior written permission.

THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE
DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE LIABLE
FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL
DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR
SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER
CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY,
OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE
OF THIS SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
"""


class DictConfig(Dict[str, Any]):
    """Class to extend the Dict class with `.` dot notation."""

    def __getattr__(self, attr: str) -> Any:
        """Extract key using dot notation."""
        return self.get(attr)

    def __setattr__(self, key: str, value: Any) -> None:
        """Set value using dot notation."""
        self.__setitem__(key, value)

    def __deepcopy__(self, _: object) -> "DictConfig":
        """Deepcopy of the Settings object."""
        return DictConfig(self.copy())
