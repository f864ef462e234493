# 📄 File: domca/modules/school/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the school records: teachers, school years, subjects and marks.
# 🧪 Purpose (Technical Summary):
# Package initialization for the school module, split into domain and infrastructure.
# 🔗 Dependencies:
# pydantic, SQLAlchemy, domca.shared
# 🔄 Connected Modules / Calls From:
# domca.shared.config.database (model registration), host application services
