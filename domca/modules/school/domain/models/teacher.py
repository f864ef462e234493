# 📄 File: domca/modules/school/domain/models/teacher.py
# 🧭 Purpose (Layman Explanation):
# A teacher and the subjects they teach.
# 🧪 Purpose (Technical Summary):
# Teacher record owning the subjects that reference it.
# 🔗 Dependencies:
# pydantic, typing, domca.shared.core
# 🔄 Connected Modules / Calls From:
# Subject (teacher_id), school ORM mapping

from typing import List

from pydantic import Field

from domca.shared.core.entity import DomainEntity
from domca.shared.core.exceptions import OwnershipMismatchError
from domca.shared.utils.validators import ensure_not_none

from .ids import TeacherId
from .subject import Subject


class Teacher(DomainEntity):
    id: TeacherId = Field(default_factory=TeacherId.new)
    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    subjects: List[Subject] = Field(default_factory=list)

    @classmethod
    def create(cls, first_name: str, last_name: str) -> "Teacher":
        return cls._build(first_name=first_name, last_name=last_name)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def add_subject(self, subject: Subject) -> None:
        """
        Attach a subject taught by this teacher.

        Raises:
            OwnershipMismatchError: If the subject references another teacher
        """
        ensure_not_none(subject, "subject")
        if subject.teacher_id != self.id:
            raise OwnershipMismatchError(
                "Subject is not taught by this teacher.",
                expected_owner=str(self.id),
                actual_owner=str(subject.teacher_id),
            )
        self.subjects.append(subject)
