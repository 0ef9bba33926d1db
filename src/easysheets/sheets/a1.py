from . import APPEND_RANGE

def build_range(range: str, sheet: str|None = None) -> str:
    """
    Prefix an A1 range with its sheet title, <sheet>!<range>.
    With no sheet the range goes through untouched, which the service
    takes to mean the first sheet.  Titles are not quoted here, a title
    with spaces needs to arrive already quoted ("'My Sheet'").
    """
    return f"{sheet}!{range}" if sheet else range

def append_range(sheet: str|None = None) -> str:
    """The range rows are appended against for a sheet."""
    return build_range(APPEND_RANGE, sheet)
