# 📄 File: domca/modules/school/domain/models/subject.py
# 🧭 Purpose (Layman Explanation):
# A school subject taught by one teacher in one school year, with the marks collected in it
# and their weighted average.
# 🧪 Purpose (Technical Summary):
# Subject record linking a teacher and a school year, owning its marks and exposing a
# derived weighted average that is never stored.
# 🔗 Dependencies:
# pydantic, typing, domca.shared.core
# 🔄 Connected Modules / Calls From:
# Teacher and SchoolYear (subjects collections), school ORM mapping

from typing import List

from pydantic import Field

from domca.shared.core.entity import DomainEntity
from domca.shared.core.exceptions import OwnershipMismatchError
from domca.shared.utils.validators import ensure_not_none

from .ids import SchoolYearId, SubjectId, TeacherId
from .mark import Mark


class Subject(DomainEntity):
    id: SubjectId = Field(default_factory=SubjectId.new)
    name: str = Field(max_length=200)
    teacher_id: TeacherId
    school_year_id: SchoolYearId
    marks: List[Mark] = Field(default_factory=list)

    @classmethod
    def create(
        cls,
        name: str,
        teacher_id: TeacherId,
        school_year_id: SchoolYearId,
    ) -> "Subject":
        return cls._build(name=name, teacher_id=teacher_id, school_year_id=school_year_id)

    @property
    def weighted_average(self) -> float:
        """Sum of value * weight over total weight; 0.0 without marks or weight."""
        total_weight = sum(mark.weight for mark in self.marks)
        if not self.marks or total_weight == 0:
            return 0.0
        return sum(mark.value * mark.weight for mark in self.marks) / total_weight

    def add_mark(self, mark: Mark) -> None:
        """
        Attach a mark given in this subject.

        Raises:
            OwnershipMismatchError: If the mark references another subject
        """
        ensure_not_none(mark, "mark")
        if mark.subject_id != self.id:
            raise OwnershipMismatchError(
                "Mark does not belong to this subject.",
                expected_owner=str(self.id),
                actual_owner=str(mark.subject_id),
            )
        self.marks.append(mark)
