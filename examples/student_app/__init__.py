"""
Student directory sample showing list/detail projections with vtag.
"""

from .demo import detail_columns, list_columns, projection_keys, run_demo
from .models import Base, Ext, Student

__all__ = [
    "Base",
    "Ext",
    "Student",
    "detail_columns",
    "list_columns",
    "projection_keys",
    "run_demo",
]
