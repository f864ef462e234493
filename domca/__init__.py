# 📄 File: domca/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Tells Python this 'domca' folder holds the data layer of the Domca tracking app
# and records its version.
#
# 🧪 Purpose (Technical Summary):
# Package initialization with version metadata for the Domca data-access layer.
#
# 🔗 Dependencies:
# - Python packaging system
#
# 🔄 Connected Modules / Calls From:
# - Host applications importing the data layer

"""
Domca - personal tracking data-access layer

Typed identifiers, self-validating entities for accounts, sessions,
hydration and school records, and their relational persistence.
"""

__version__ = "1.0.0"
__title__ = "Domca Data Access"

__all__ = [
    "__version__",
    "__title__",
]
