# 📄 File: domca/shared/core/unit_of_work.py
# 🧭 Purpose (Layman Explanation):
# The "save" button of the data layer: everything prepared through the repositories is
# written to the database in one go when it is pressed.
# 🧪 Purpose (Technical Summary):
# Unit-of-work contract committing all staged repository changes as one batch and
# reporting how many entities were written.
# 🔗 Dependencies:
# abc
# 🔄 Connected Modules / Calls From:
# domca.shared.infrastructure.database.unit_of_work (implementation),
# domca.shared.core.dependencies (provider)

from abc import ABC, abstractmethod


class UnitOfWork(ABC):
    """Commits every pending addition, update and removal as one batch."""

    @abstractmethod
    async def save_changes(self) -> int:
        """
        Persist all staged changes.

        Returns:
            Number of entities inserted, updated or deleted

        Raises:
            RepositoryError: If the store rejects the batch
        """
        pass
