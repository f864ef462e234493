# 📄 File: domca/modules/user_management/domain/models/ids.py
# 🧭 Purpose (Layman Explanation):
# The label types for users, their login sessions and their water-intake records.
# 🧪 Purpose (Technical Summary):
# Typed identifier kinds for the user management aggregate, each a thin EntityId
# subclass declaring its prefix.
# 🔗 Dependencies:
# domca.shared.core.identifiers
# 🔄 Connected Modules / Calls From:
# User, UserSession and HydrationRecord models, ORM models, repositories

from typing import ClassVar

from domca.shared.core.identifiers import EntityId


class UserId(EntityId):
    prefix: ClassVar[str] = "USR"


class UserSessionId(EntityId):
    prefix: ClassVar[str] = "USESS"


class HydrationRecordId(EntityId):
    prefix: ClassVar[str] = "HR"
