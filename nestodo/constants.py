"""Constants used across nestodo.

This module defines shared constants to ensure consistency.
"""

# Persistence
DEFAULT_NAMESPACE = "todoList"  # Same key the browser app used for localStorage

# Collapse control labels
COLLAPSE_LABEL = "Collapse"
EXPAND_LABEL = "Expand"

# Pending input field
INPUT_PLACEHOLDER = "Write Your Todo Here"

# Completed label styling
COMPLETED_COLOR = "#808080"

# Log file rotation
LOG_MAX_BYTES = 1_000_000
LOG_BACKUP_COUNT = 3
