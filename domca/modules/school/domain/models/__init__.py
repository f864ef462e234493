"""
School domain models.

Lightweight records linked by typed identifiers: a Subject references its
Teacher and SchoolYear and owns its Marks.
"""

from .ids import MarkId, SchoolYearId, SubjectId, TeacherId
from .mark import Mark
from .school_year import SchoolYear
from .subject import Subject
from .teacher import Teacher

__all__ = [
    "Mark",
    "MarkId",
    "SchoolYear",
    "SchoolYearId",
    "Subject",
    "SubjectId",
    "Teacher",
    "TeacherId",
]
