# config.py
"""
Library configuration constants for undo_history
"""

# Logging
LOGGER_NAME = "undo_history"  # Parent logger; modules log to children of it

# Notification channels
FIRST_SUBSCRIPTION_HANDLE = 0

# Composite actions
COMPOSITE_REVERSE_UNDO = False  # Undo children in storage order by default
