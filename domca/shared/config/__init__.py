# 📄 File: domca/shared/config/__init__.py
#
# 🧭 Purpose (Layman Explanation):
# Contains the settings and database configuration that tell the app
# where its data lives and how it should behave.
#
# 🧪 Purpose (Technical Summary):
# Configuration package initialization with exports for settings management
# and database configuration.
#
# 🔗 Dependencies:
# - settings.py (application settings)
# - database.py (database configuration)
#
# 🔄 Connected Modules / Calls From:
# - All modules requiring configuration
# - Infrastructure components

"""
Configuration Management Package

Handles all application configuration including:
- Environment-based settings
- Database connection configuration
"""

from .settings import get_settings, Settings

__all__ = [
    "get_settings",
    "Settings",
]
