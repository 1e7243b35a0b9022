"""Utility functions for RimeGuard."""

from rimeguard.utils.constants import Constants
from rimeguard.utils.debug import is_debug_code, log_debug_code, log_if_debug_code
from rimeguard.utils.helpers import expand_file_path, read_json_file, unwrap_list
from rimeguard.utils.logging import setup_logger

__all__ = [
    "Constants",
    "is_debug_code",
    "log_debug_code",
    "log_if_debug_code",
    "expand_file_path",
    "read_json_file",
    "unwrap_list",
    "setup_logger",
]
