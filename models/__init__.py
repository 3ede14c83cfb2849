from .base_model import BaseAxisModel
from .axis_model import AxisModelParams, FirstOrderAxisModel

__all__ = [
    "BaseAxisModel",
    "AxisModelParams",
    "FirstOrderAxisModel",
]
