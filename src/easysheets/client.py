import logging
import os
from typing import Any, Self

from googleapiclient.discovery import Resource

from .access import ServiceAccountAccess
from .sheets import ops
from .sheets.a1 import append_range, build_range
from .sheets.headers import map_rows
from .sheets.requests import AddSheetRequest, DeleteSheetRequest, make_request
from .sheets.resources import ValueInputOption

logger = logging.getLogger(__name__)

class EasySheets():
    """
    One spreadsheet, reachable through a service account.

    Every operation is a single call to the Sheets API.  Ranges are A1 strings
    relative to a sheet, give sheet= to address a tab other than the first:

        sheets = EasySheets(spreadsheet_id, os.environ["CREDS"])
        sheets.add_row(["2024-01-01", 42], sheet="Log")
        sheets.get_range("A1:C", sheet="Log", header_row=True)
    """
    ENV_SPREADSHEET_ID = "EASYSHEETS_SPREADSHEET_ID"
    ENV_CREDS = "EASYSHEETS_CREDS"

    def __init__(self, spreadsheet_id: str, creds64: str,
                 scopes: None|list[str]|str = None,
                 value_input_option: str = ValueInputOption.USER_ENTERED) -> None:
        if not spreadsheet_id:
            raise ValueError("A spreadsheet id is required")
        self._spreadsheet_id = spreadsheet_id
        self._access = ServiceAccountAccess(creds64, scopes)
        self._value_input_option = ValueInputOption.get(value_input_option)

    @classmethod
    def from_env(cls, environ: dict|None = None, **kwargs) -> Self:
        """
        Build from EASYSHEETS_SPREADSHEET_ID and EASYSHEETS_CREDS (the base64
        service account key).
        """
        env = os.environ if environ is None else environ
        missing = [k for k in (cls.ENV_SPREADSHEET_ID, cls.ENV_CREDS) if not env.get(k)]
        if missing:
            raise ValueError(f"Missing environment variables: {', '.join(missing)}")
        return cls(env[cls.ENV_SPREADSHEET_ID], env[cls.ENV_CREDS], **kwargs)

    def __str__(self) -> str:
        return f"{self._spreadsheet_id}:{str(self._access)}"

    def __repr__(self) -> str:
        return f"{self.__class__}:{str(self)}"

    @property
    def spreadsheet_id(self) -> str:
        return self._spreadsheet_id

    @property
    def access(self) -> ServiceAccountAccess:
        return self._access

    @property
    def sheets(self) -> Resource|None:
        """The built service, None until authorize() has run."""
        return self._access.services.get("sheets:v4", None)

    def authorize(self) -> Resource:
        """
        Authenticate on first use and hand back the sheets service.
        Later calls return the same service.
        """
        return self._access.get_service("sheets", "v4")

    def add_row(self, values: list[Any], sheet: str|None = None) -> bool:
        """Append a single row after the last row of the table in sheet."""
        return self.add_multiple_rows([values], sheet=sheet)

    def add_multiple_rows(self, values: list[list[Any]], sheet: str|None = None) -> bool:
        """Append rows after the last row of the table in sheet."""
        ops.append_values(self.authorize(), self._spreadsheet_id, append_range(sheet),
                          values, self._value_input_option)
        return True

    def add_sheet(self, title: str) -> bool:
        ops.batch_update(self.authorize(), self._spreadsheet_id,
                         make_request(AddSheetRequest(title)))
        logger.info("added sheet %s to %s", title, self._spreadsheet_id)
        return True

    def clear_range(self, range: str, sheet: str|None = None) -> bool:
        ops.clear_values(self.authorize(), self._spreadsheet_id, build_range(range, sheet))
        return True

    def delete_sheet(self, sheet_title: str) -> bool:
        """
        Delete the sheet with this title.  False if there is no such sheet.
        """
        sheet_id = self.get_sheet_id(sheet_title)
        if sheet_id is None:
            logger.warning("no sheet titled %s in %s", sheet_title, self._spreadsheet_id)
            return False
        ops.batch_update(self.authorize(), self._spreadsheet_id,
                         make_request(DeleteSheetRequest(sheet_id)))
        logger.info("deleted sheet %s(%d) from %s", sheet_title, sheet_id, self._spreadsheet_id)
        return True

    def get_range(self, range: str, sheet: str|None = None,
                  header_row: bool|str = False) -> list[dict]|list[list[Any]]|None:
        """
        Read a range.  Plain rows by default, None when the range is empty.
        With header_row the first row becomes the keys of a dict per following
        row, camel cased ("First Name" -> "firstName") unless header_row="raw".
        """
        vr = ops.get_values(self.authorize(), self._spreadsheet_id, build_range(range, sheet))
        return map_rows(vr.values or None, header_row)

    def update_range(self, range: str, values: list[list[Any]], sheet: str|None = None) -> bool:
        ops.update_values(self.authorize(), self._spreadsheet_id, build_range(range, sheet),
                          values, self._value_input_option)
        return True

    def get_sheet_id(self, sheet_title: str) -> int|None:
        """Id of the first sheet with this title, None if there isn't one."""
        spreadsheet = ops.get_spreadsheet(self.authorize(), self._spreadsheet_id)
        s = spreadsheet.find_sheet(sheet_title)
        return s.properties.sheetId if s else None
