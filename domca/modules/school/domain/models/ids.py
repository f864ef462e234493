# 📄 File: domca/modules/school/domain/models/ids.py
# 🧭 Purpose (Layman Explanation):
# The label types for teachers, subjects, school years and marks.
# 🧪 Purpose (Technical Summary):
# Typed identifier kinds for the school records, each a thin EntityId subclass
# declaring its prefix.
# 🔗 Dependencies:
# domca.shared.core.identifiers
# 🔄 Connected Modules / Calls From:
# Teacher, Subject, SchoolYear and Mark models, ORM models

from typing import ClassVar

from domca.shared.core.identifiers import EntityId


class MarkId(EntityId):
    prefix: ClassVar[str] = "MARK"


class SubjectId(EntityId):
    prefix: ClassVar[str] = "SUB"


class TeacherId(EntityId):
    prefix: ClassVar[str] = "TCHR"


class SchoolYearId(EntityId):
    prefix: ClassVar[str] = "SY"
