"""
Import all models here to ensure they are registered with SQLAlchemy.
"""
# Import Base
from chatcrm.models.base import Base

# Import all models
from chatcrm.models.user import User
from chatcrm.models.project import Project

# This allows Base.metadata.create_all to see every table
