"""
Connect cluster services.
"""

from .service import ConnectService
from .util import get_map_value_or_string

__all__ = ["ConnectService", "get_map_value_or_string"]
