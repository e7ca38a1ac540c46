"""Types declared by the scripting fixture."""

from entities.markers import OVO, OWO, UWU
from entities.numeric import NonFiniteValueError, NumericEntity

__all__ = ["OVO", "OWO", "UWU", "NonFiniteValueError", "NumericEntity"]
