# 📄 File: domca/modules/school/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how teachers, school years, subjects and marks are laid out as
# tables in the database.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for the school records with typed identifier columns and the
# teacher/school-year -> subject -> mark relationships. Derived values (label,
# weighted average) are not stored.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - domca.shared.config.database (declarative base)
# - domca.shared.infrastructure.database.types (typed identifier columns)
#
# 🔄 Connected Modules / Calls From:
# - mappers.py (domain <-> row translation)
# - migrations (schema generation)

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from domca.shared.config.database import DatabaseBase
from domca.shared.infrastructure.database.types import EntityIdType

from domca.modules.school.domain.models.ids import MarkId, SchoolYearId, SubjectId, TeacherId


class TeacherModel(DatabaseBase):
    """SQLAlchemy model for teachers."""
    __tablename__ = "teachers"

    id = Column(EntityIdType(TeacherId), primary_key=True, nullable=False)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)

    subjects = relationship(
        "SubjectModel",
        back_populates="teacher",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<TeacherModel(id={self.id}, last_name={self.last_name})>"


class SchoolYearModel(DatabaseBase):
    """SQLAlchemy model for school years."""
    __tablename__ = "school_years"

    id = Column(EntityIdType(SchoolYearId), primary_key=True, nullable=False)
    start_year = Column(Integer, nullable=False)
    end_year = Column(Integer, nullable=False)

    subjects = relationship("SubjectModel", back_populates="school_year", lazy="selectin")

    def __repr__(self) -> str:
        return f"<SchoolYearModel(id={self.id}, {self.start_year}/{self.end_year})>"


class SubjectModel(DatabaseBase):
    """SQLAlchemy model for subjects."""
    __tablename__ = "subjects"

    id = Column(EntityIdType(SubjectId), primary_key=True, nullable=False)
    name = Column(String(200), nullable=False)
    teacher_id = Column(
        EntityIdType(TeacherId),
        ForeignKey("teachers.id"),
        nullable=False,
        index=True,
    )
    school_year_id = Column(
        EntityIdType(SchoolYearId),
        ForeignKey("school_years.id"),
        nullable=False,
        index=True,
    )

    teacher = relationship("TeacherModel", back_populates="subjects")
    school_year = relationship("SchoolYearModel", back_populates="subjects")
    marks = relationship(
        "MarkModel",
        back_populates="subject",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<SubjectModel(id={self.id}, name={self.name})>"


class MarkModel(DatabaseBase):
    """SQLAlchemy model for marks."""
    __tablename__ = "marks"

    id = Column(EntityIdType(MarkId), primary_key=True, nullable=False)
    value = Column(Integer, nullable=False)
    weight = Column(Integer, nullable=False)
    subject_id = Column(
        EntityIdType(SubjectId),
        ForeignKey("subjects.id"),
        nullable=False,
        index=True,
    )

    subject = relationship("SubjectModel", back_populates="marks")

    def __repr__(self) -> str:
        return f"<MarkModel(id={self.id}, value={self.value}, weight={self.weight})>"
