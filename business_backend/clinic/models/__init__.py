"""
Clinic models export surface.
"""

from .admission import Admission
from .complaint import MedicalComplaint
from .lab_order import LabOrder

__all__ = [
    "Admission",
    "LabOrder",
    "MedicalComplaint",
]
