"""
PyReferencing: transformation matrices for geospatial referencing.

Builds and manipulates the affine and generalized linear matrices that map
coordinates between coordinate systems: axis reordering and inversion,
region-to-region scaling, composition and inversion.

Submodules:
    matrix: GeneralMatrix, axis/region builders, text codec, affine adapter
    referencing: AxisDirection, GeneralEnvelope
    core: Exceptions, protocols, validation, numeric backend
"""

__version__ = "0.1.0"
__author__ = "Hai-Shuo"
__email__ = "contact@sgcx.org"

from pyreferencing import matrix
from pyreferencing import referencing
from pyreferencing.matrix import GeneralMatrix
from pyreferencing.referencing import AxisDirection, GeneralEnvelope

__all__ = [
    "__version__",
    "matrix",
    "referencing",
    "GeneralMatrix",
    "AxisDirection",
    "GeneralEnvelope",
]
