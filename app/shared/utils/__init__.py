# 📄 File: app/shared/utils/__init__.py

# 🧭 Purpose (Layman Explanation):
# This file sets up a collection of helpful tools that other parts of CigarMap
# use for common tasks like logging, data validation, and formatting prices.

# 🧪 Purpose (Technical Summary):
# Initializes the utilities package: structured logging, validators and formatters.

# 🔗 Dependencies:
# - logging: Structured logging utilities
# - validators: Data validation functions
# - formatters: Data formatting utilities

# 🔄 Connected Modules / Calls From:
# Used by: All application modules
