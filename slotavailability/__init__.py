"""
slotavailability - bookable sessions from available and booked time ranges.
"""

from .domain.availability import Availability
from .domain.models import TimeRange

__version__ = "0.1.0"

__all__ = ["Availability", "TimeRange", "__version__"]
