# 📄 File: domca/modules/user_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes everything about user accounts: profile data, login sessions and the
# drinking log.
# 🧪 Purpose (Technical Summary):
# Package initialization for the user management module (User aggregate with owned
# UserSession and HydrationRecord entities), split into domain and infrastructure.
# 🔗 Dependencies:
# pydantic, SQLAlchemy, domca.shared
# 🔄 Connected Modules / Calls From:
# domca.shared.core.dependencies, host application services
