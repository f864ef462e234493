# 📄 File: domca/modules/school/domain/models/mark.py
# 🧭 Purpose (Layman Explanation):
# A single grade a student received in a subject, together with how much it counts.
# 🧪 Purpose (Technical Summary):
# Mark record (value, weight, owning subject) built through the shared entity base.
# 🔗 Dependencies:
# pydantic, domca.shared.core.entity
# 🔄 Connected Modules / Calls From:
# Subject (marks collection, weighted average), school ORM mapping

from pydantic import Field

from domca.shared.core.entity import DomainEntity

from .ids import MarkId, SubjectId


class Mark(DomainEntity):
    id: MarkId = Field(default_factory=MarkId.new)
    value: int
    weight: int
    subject_id: SubjectId

    @classmethod
    def create(cls, value: int, weight: int, subject_id: SubjectId) -> "Mark":
        return cls._build(value=value, weight=weight, subject_id=subject_id)
