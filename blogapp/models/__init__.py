"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - BlogPost is the aggregate root for comments; users stand alone

Design Decisions:
    - One file per entity
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from blogapp.models.user import User  # noqa: F401
from blogapp.models.blog_post import BlogPost  # noqa: F401
from blogapp.models.comment import Comment  # noqa: F401
