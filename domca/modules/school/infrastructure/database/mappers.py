# 📄 File: domca/modules/school/infrastructure/database/mappers.py
# 🧭 Purpose (Layman Explanation):
# Translates between in-memory teachers, school years, subjects and marks and their
# database rows.
#
# 🧪 Purpose (Technical Summary):
# Domain <-> ORM mapping for the school records. Subjects (with their marks) are
# persisted through their teacher; school years map their scalar columns only.
#
# 🔗 Dependencies:
# - domca.modules.school.domain.models
# - domca.modules.school.infrastructure.database.models

from domca.modules.school.domain.models import Mark, SchoolYear, Subject, Teacher
from domca.modules.school.infrastructure.database.models import (
    MarkModel,
    SchoolYearModel,
    SubjectModel,
    TeacherModel,
)


def mark_to_domain(model: MarkModel) -> Mark:
    return Mark.rehydrate(
        id=model.id,
        value=model.value,
        weight=model.weight,
        subject_id=model.subject_id,
    )


def mark_to_model(mark: Mark) -> MarkModel:
    return MarkModel(
        id=mark.id,
        value=mark.value,
        weight=mark.weight,
        subject_id=mark.subject_id,
    )


def subject_to_domain(model: SubjectModel) -> Subject:
    return Subject.rehydrate(
        id=model.id,
        name=model.name,
        teacher_id=model.teacher_id,
        school_year_id=model.school_year_id,
        marks=[mark_to_domain(m) for m in model.marks],
    )


def subject_to_model(subject: Subject) -> SubjectModel:
    return SubjectModel(
        id=subject.id,
        name=subject.name,
        teacher_id=subject.teacher_id,
        school_year_id=subject.school_year_id,
        marks=[mark_to_model(m) for m in subject.marks],
    )


def teacher_to_domain(model: TeacherModel) -> Teacher:
    return Teacher.rehydrate(
        id=model.id,
        first_name=model.first_name,
        last_name=model.last_name,
        subjects=[subject_to_domain(s) for s in model.subjects],
    )


def teacher_to_model(teacher: Teacher) -> TeacherModel:
    """Build a row graph for a teacher including the subjects they teach."""
    return TeacherModel(
        id=teacher.id,
        first_name=teacher.first_name,
        last_name=teacher.last_name,
        subjects=[subject_to_model(s) for s in teacher.subjects],
    )


def school_year_to_domain(model: SchoolYearModel) -> SchoolYear:
    return SchoolYear.rehydrate(
        id=model.id,
        start_year=model.start_year,
        end_year=model.end_year,
        subjects=[subject_to_domain(s) for s in model.subjects],
    )


def school_year_to_model(school_year: SchoolYear) -> SchoolYearModel:
    return SchoolYearModel(
        id=school_year.id,
        start_year=school_year.start_year,
        end_year=school_year.end_year,
    )
