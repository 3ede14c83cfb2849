from .euler import euler_integration
from .rk45 import rk4_integration

__all__ = ["euler_integration", "rk4_integration"]
