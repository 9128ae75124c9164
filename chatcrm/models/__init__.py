"""
Database models.
"""
from chatcrm.models.base import Base
from chatcrm.models.user import Role, User
from chatcrm.models.project import Project
