from dataclasses import dataclass, asdict, field
from typing import List
import re

from ..resources import SheetsResourceBase
from .resources import Spreadsheet

class SheetsUpdateRequestBase(SheetsResourceBase):
    """
    Base class for spreadsheet batchUpdate requests to get the actual
    request dict into the right format.
    """
    def to_request(self) -> dict[str,dict]:
        name = self.__class__.__name__
        # need to strip off the trailing 'Request' class name and
        # set the first letter to lower case, AddSheetRequest -> addSheet
        request = {}
        m = re.match("^([a-zA-Z])([a-zA-Z]+)Request$", name)
        if m:
            key = m.group(1).lower() + m.group(2)
            request[key] = self.to_base()
        else:
            raise RuntimeError("Invalid Google Sheets request format for class name")

        return request

@dataclass
class AddSheetRequest(SheetsUpdateRequestBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/request#addsheetrequest
    Only the title is sent, the service picks the id, index and grid size.
    """
    title: str

    def to_base(self) -> dict:
        return {'properties': {'title': self.title}}

@dataclass
class DeleteSheetRequest(SheetsUpdateRequestBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/request#deletesheetrequest
    """
    sheetId: int

@dataclass
class BatchUpdateRequest(SheetsUpdateRequestBase):
    """
    Generate a spreadsheet batchUpdate request body.
    Most likely you'd use make_request() directly to generate
    the request dict JIT
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/batchUpdate#request-body
    """
    requests: List[SheetsUpdateRequestBase|dict]
    includeSpreadsheetInResponse: bool = field(default=False)

    def to_base(self) -> dict:
        return {
            'requests': [r.to_request() if isinstance(r, SheetsUpdateRequestBase) else dict(r) for r in self.requests],
            'includeSpreadsheetInResponse': self.includeSpreadsheetInResponse
        }

def make_request(*requests: SheetsUpdateRequestBase|dict,
                 includeSpreadsheetInResponse: bool = False) -> dict:
    """
    Convenience function to assemble the request body with the usual parameters.
    """
    return BatchUpdateRequest(requests=list(requests),
                              includeSpreadsheetInResponse=includeSpreadsheetInResponse).to_base()

@dataclass
class BatchUpdateResponse(SheetsResourceBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/batchUpdate#response-body
    """
    spreadsheetId: str = field(default="")
    replies: List[dict] = field(default_factory=list)
    updatedSpreadsheet: Spreadsheet|dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.fixup()

    def __bool__(self) -> bool:
        return bool(self.spreadsheetId)

    def fixup(self) -> None:
        self.updatedSpreadsheet = self.updatedSpreadsheet if isinstance(self.updatedSpreadsheet,Spreadsheet) else Spreadsheet(**dict(self.updatedSpreadsheet))

    def to_base(self) -> dict:
        self.fixup()
        b = asdict(self)
        b['updatedSpreadsheet'] = self.updatedSpreadsheet.to_base()
        return b
