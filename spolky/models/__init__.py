"""
Modely SQLAlchemy / SQLAlchemy models.
Všechny modely importovat zde, aby je metadata znala.
Import all models here so the metadata sees them.
"""

from spolky.models.user import Role, User
from spolky.models.club import Club
from spolky.models.audit import AuditAction, AuditLog
from spolky.models.dog import Dog
from spolky.models.exhibition import Exhibition, ExhibitionResult

__all__ = [
    "Role",
    "User",
    "Club",
    "AuditAction",
    "AuditLog",
    "Dog",
    "Exhibition",
    "ExhibitionResult",
]
