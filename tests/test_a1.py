import pytest

from easysheets.sheets import APPEND_RANGE
from easysheets.sheets.a1 import append_range, build_range

def test_build_range_with_sheet():
    assert(build_range("A1:B2", "Expenses") == "Expenses!A1:B2")
    assert(build_range("C:C", "'My Sheet'") == "'My Sheet'!C:C")

def test_build_range_without_sheet():
    assert(build_range("A1:B2") == "A1:B2")
    assert(build_range("A1:B2", None) == "A1:B2")
    # an empty title is the same as none
    assert(build_range("A1:B2", "") == "A1:B2")

def test_append_range():
    assert(APPEND_RANGE == "A1:A5000000")
    assert(append_range() == "A1:A5000000")
    assert(append_range("Log") == "Log!A1:A5000000")

