# 📄 File: domca/modules/school/domain/models/school_year.py
# 🧭 Purpose (Layman Explanation):
# A school year such as "2024/2025" and the subjects taught during it.
# 🧪 Purpose (Technical Summary):
# SchoolYear record with a derived display label and the subjects that reference it.
# 🔗 Dependencies:
# pydantic, typing, domca.shared.core
# 🔄 Connected Modules / Calls From:
# Subject (school_year_id), school ORM mapping

from typing import List

from pydantic import Field

from domca.shared.core.entity import DomainEntity
from domca.shared.core.exceptions import OwnershipMismatchError
from domca.shared.utils.validators import ensure_not_none

from .ids import SchoolYearId
from .subject import Subject


class SchoolYear(DomainEntity):
    id: SchoolYearId = Field(default_factory=SchoolYearId.new)
    start_year: int
    end_year: int
    subjects: List[Subject] = Field(default_factory=list)

    @classmethod
    def create(cls, start_year: int, end_year: int) -> "SchoolYear":
        return cls._build(start_year=start_year, end_year=end_year)

    @property
    def label(self) -> str:
        return f"{self.start_year}/{self.end_year}"

    def add_subject(self, subject: Subject) -> None:
        """
        Attach a subject taught during this school year.

        Raises:
            OwnershipMismatchError: If the subject references another school year
        """
        ensure_not_none(subject, "subject")
        if subject.school_year_id != self.id:
            raise OwnershipMismatchError(
                "Subject does not belong to this school year.",
                expected_owner=str(self.id),
                actual_owner=str(subject.school_year_id),
            )
        self.subjects.append(subject)
