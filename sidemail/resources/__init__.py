"""API resource groups."""

from .base import BaseResource
from .contact import Contact
from .domain import Domain
from .email import Email
from .messenger import Messenger
from .project import Project

__all__ = [
    "BaseResource",
    "Contact",
    "Domain",
    "Email",
    "Messenger",
    "Project",
]
