"""
Class implementations of the sheets resources this library reads and writes.
As these are just logical groupings of data fields we use dataclasses.
dataclasses.asdict() gives the dict the discovery client needs, but there is
no inverse, so nested resources get a fixup() that turns raw dicts from a
response back into the dataclass.
Only the fields of resources we touch are implemented.
"""
from dataclasses import dataclass, field, asdict
from typing import Any, List

from ..resources import SheetsResourceBase

class ValueInputOption():
    """
    An 'enum' in the sheets client is just a string so this is
    just to translate and validate input.
    https://developers.google.com/sheets/api/reference/rest/v4/ValueInputOption
    """
    RAW = "RAW"
    USER_ENTERED = "USER_ENTERED"

    _VALID_VALUE_INPUT_OPTIONS = {
        "RAW": RAW,
        "USER": USER_ENTERED,
        "USER_ENTERED": USER_ENTERED
    }

    @classmethod
    def get(cls, option: str) -> str:
        """Return the service's spelling of option, or raise ValueError."""
        v = cls._VALID_VALUE_INPUT_OPTIONS.get(str(option).upper(), "")
        if not v:
            raise ValueError(f"Invalid valueInputOption value: {option}")
        return v

@dataclass
class ValueRange(SheetsResourceBase):
    """https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets.values#resource:-valuerange"""
    range: str = field(default="")
    majorDimension: str = field(default="")
    values: List[List[Any]] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.range)

@dataclass
class UpdateValuesResponse(SheetsResourceBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/UpdateValuesResponse
    """
    spreadsheetId: str = field(default="")
    updatedRange: str = field(default="")
    updatedRows: int = field(default=0)
    updatedColumns: int = field(default=0)
    updatedCells: int = field(default=0)
    updatedData: ValueRange|dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        self.updatedData = self.updatedData if isinstance(self.updatedData,ValueRange) else ValueRange(**dict(self.updatedData))

    def __bool__(self) -> bool:
        return bool(self.spreadsheetId) and bool(self.updatedRange)

    def to_base(self) -> dict:
        self.fixup()
        b = asdict(self)
        b['updatedData'] = self.updatedData.to_base()
        return b

@dataclass
class AppendValuesResponse(SheetsResourceBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets.values/append#response-body
    """
    spreadsheetId: str = field(default="")
    tableRange: str = field(default="")
    updates: UpdateValuesResponse|dict = field(default_factory=dict)

    def __post_init__(self) -> None:
        self.fixup()

    def fixup(self) -> None:
        self.updates = self.updates if isinstance(self.updates,UpdateValuesResponse) else UpdateValuesResponse(**dict(self.updates))

    def __bool__(self) -> bool:
        return bool(self.spreadsheetId)

    def to_base(self) -> dict:
        self.fixup()
        b = asdict(self)
        b['updates'] = self.updates.to_base()
        return b

@dataclass
class ClearValuesResponse(SheetsResourceBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets.values/clear#response-body
    """
    spreadsheetId: str = field(default="")
    clearedRange: str = field(default="")

    def __bool__(self) -> bool:
        return bool(self.spreadsheetId)

@dataclass
class SheetProperties(SheetsResourceBase):
    """https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/sheets#sheetproperties"""
    sheetId: int|None = field(default=None)
    title: str = field(default="")
    index: int|None = field(default=None)
    sheetType: str = field(default="")
    gridProperties: dict = field(default_factory=dict)
    hidden: bool = field(default=False)
    tabColor: dict = field(default_factory=dict)
    tabColorStyle: dict = field(default_factory=dict)
    rightToLeft: bool = field(default=False)
    dataSourceSheetProperties: dict = field(default_factory=dict)

    def __bool__(self) -> bool:
        """
        A sheet id of 0 is valid (and common, its the first sheet)
        so only a missing id is invalid.
        """
        return self.sheetId is not None and bool(self.title)

    def __str__(self) -> str:
        if self:
            return f"{str(self.title)}({str(self.sheetId)}[{str(self.index)}])"
        return "<invalid sheet>"

@dataclass(init=False)
class Sheet(SheetsResourceBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/sheets#sheet
    Representation of a sheet (tab) within a spreadsheet.  Only the properties
    are kept, the rest of what the service sends (grid data, charts, etc) is
    ignored.
    """
    properties: SheetProperties|dict = field(default_factory=dict)

    def __init__(self, properties: SheetProperties|dict|None = None, **kwargs) -> None:
        self.properties = {} if properties is None else properties
        self.fixup()

    def fixup(self) -> None:
        if not isinstance(self.properties, SheetProperties):
            known = SheetProperties.__dataclass_fields__
            self.properties = SheetProperties(**{k: v for k, v in dict(self.properties).items() if k in known})

    def to_base(self) -> dict:
        self.fixup()
        return {'properties': self.properties.to_base()}

    def __bool__(self) -> bool:
        return bool(self.properties)

    def __str__(self) -> str:
        return str(self.properties)

@dataclass(init=False)
class Spreadsheet(SheetsResourceBase):
    """
    https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets#resource:-spreadsheet
    The representation of a spreadsheet, enough of it to find sheets by title.
    """
    spreadsheetId: str = field(default="")
    properties: dict = field(default_factory=dict)
    sheets: List[Sheet|dict] = field(default_factory=list)
    spreadsheetUrl: str = field(default="")

    def __init__(self, spreadsheetId: str = "",
                 properties: dict|None = None,
                 sheets: List[Sheet|dict]|None = None,
                 spreadsheetUrl: str = "", **kwargs) -> None:
        self.spreadsheetId = spreadsheetId
        self.properties = dict(properties or {})
        self.sheets = list(sheets or [])
        self.spreadsheetUrl = spreadsheetUrl
        self.fixup()

    def fixup(self) -> None:
        self.sheets = [s if isinstance(s,Sheet) else Sheet(**dict(s)) for s in self.sheets]

    def to_base(self) -> dict:
        self.fixup()
        b = asdict(self)
        b['sheets'] = [s.to_base() for s in self.sheets]
        return b

    def __bool__(self) -> bool:
        return bool(self.spreadsheetId)

    def __str__(self) -> str:
        if self.spreadsheetId:
            title = self.properties.get('title', self.spreadsheetId)
            return f"{title}[{','.join(str(s) for s in self.sheets)}]"
        return 'unconnected'

    @property
    def title(self) -> str:
        return self.properties.get('title', "")

    def find_sheet(self, title: str) -> Sheet|None:
        """First sheet with a matching title, or None"""
        for s in self.sheets:
            if s.properties.title == title:
                return s
        return None
