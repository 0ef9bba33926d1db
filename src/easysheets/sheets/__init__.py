"""
Helpers for shaping Google Sheets requests and responses
"""

# appends target the whole of column A so the service finds the end of the
# table on its own, whatever the sheet size
APPEND_RANGE = "A1:A5000000"
