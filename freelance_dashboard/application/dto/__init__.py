"""
Data transfer objects for seed data and state snapshots.
"""

from .base_dto import BaseDTO, to_dict
from .state_dto import ClientDTO, ProjectDTO, PaymentDTO, AppStateDTO

__all__ = [
    "BaseDTO",
    "to_dict",
    "ClientDTO",
    "ProjectDTO",
    "PaymentDTO",
    "AppStateDTO",
]
