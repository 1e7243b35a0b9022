"""Vulture whitelist for false positives.

Names listed here are used by pydantic, sqlite3 or the context manager
protocol in ways static analysis cannot detect.
"""
# pylint: disable=all
# Pydantic field validators - called by the framework via @field_validator
_.parse_string_set  # noqa: F821  # unused method (rimeguard/core/config.py)
_.parse_type_weights  # noqa: F821  # unused method (rimeguard/core/config.py)
_.check_type_names  # noqa: F821  # unused method (rimeguard/core/config.py)

# Pydantic model validator - called by the framework via @model_validator
_.validate_cross_fields  # noqa: F821  # unused method (rimeguard/core/config.py)

# Pydantic model_config class variable - read at class definition time
# Enables the camelCase aliases of the web API on every ApiModel
model_config  # noqa: F821  # unused variable (rimeguard/core/types.py)

# sqlite3 connection attribute - read by the driver when building rows
_.row_factory  # noqa: F821  # unused attribute (rimeguard/store/sqlite.py)

# Context manager protocol arguments
exc_type  # unused variable (rimeguard/store/base.py)
exc  # unused variable (rimeguard/store/base.py)
tb  # unused variable (rimeguard/store/base.py)

# Public library API re-exported from rimeguard.core
is_valid_code  # unused function (rimeguard/core/codes.py)
