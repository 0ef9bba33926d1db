import pytest
from googleapiclient.errors import HttpError
from httplib2 import Response

from easysheets import EasySheets

from conftest import KEY, encode

@pytest.fixture
def sheets(creds64, google):
    return EasySheets("sheet123", creds64)

def values(service):
    return service.spreadsheets.return_value.values.return_value

def test_init(creds64):
    es = EasySheets("sheet123", creds64)
    assert(es.spreadsheet_id == "sheet123")
    assert(es.sheets is None)
    with pytest.raises(ValueError):
        EasySheets("", creds64)
    with pytest.raises(ValueError):
        EasySheets("sheet123", creds64, value_input_option="nope")

def test_from_env(creds64):
    es = EasySheets.from_env({"EASYSHEETS_SPREADSHEET_ID": "sheet123", "EASYSHEETS_CREDS": creds64})
    assert(es.spreadsheet_id == "sheet123")
    assert(es.access.client_email == KEY["client_email"])
    with pytest.raises(ValueError):
        EasySheets.from_env({"EASYSHEETS_SPREADSHEET_ID": "sheet123"})

def test_from_os_environ(creds64, monkeypatch):
    monkeypatch.setenv("EASYSHEETS_SPREADSHEET_ID", "env-sheet")
    monkeypatch.setenv("EASYSHEETS_CREDS", creds64)
    assert(EasySheets.from_env().spreadsheet_id == "env-sheet")

def test_authorize_once(sheets, google, service):
    from_info, build = google
    assert(sheets.authorize() is service)
    assert(sheets.authorize() is service)
    assert(sheets.sheets is service)
    assert(from_info.call_count == 1)
    assert(build.call_count == 1)

def test_add_row(sheets, service):
    assert(sheets.add_row(["Ada", "Lovelace", 36]) is True)
    values(service).append.assert_called_once_with(spreadsheetId="sheet123",
                                                   range="A1:A5000000",
                                                   valueInputOption="USER_ENTERED",
                                                   body={"values": [["Ada", "Lovelace", 36]]})

def test_add_row_to_sheet(sheets, service):
    sheets.add_row(["x"], sheet="Expenses")
    assert(values(service).append.call_args.kwargs["range"] == "Expenses!A1:A5000000")

def test_add_multiple_rows(sheets, service):
    rows = [["a", 1], ["b", 2]]
    assert(sheets.add_multiple_rows(rows, sheet="Log") is True)
    values(service).append.assert_called_once_with(spreadsheetId="sheet123",
                                                   range="Log!A1:A5000000",
                                                   valueInputOption="USER_ENTERED",
                                                   body={"values": rows})

def test_raw_input(creds64, google, service):
    es = EasySheets("sheet123", creds64, value_input_option="RAW")
    es.update_range("A1", [["=1+1"]])
    assert(values(service).update.call_args.kwargs["valueInputOption"] == "RAW")

def test_add_sheet(sheets, service):
    assert(sheets.add_sheet("Log") is True)
    service.spreadsheets.return_value.batchUpdate.assert_called_once_with(
        spreadsheetId="sheet123",
        body={"requests": [{"addSheet": {"properties": {"title": "Log"}}}],
              "includeSpreadsheetInResponse": False})

def test_clear_range(sheets, service):
    assert(sheets.clear_range("A2:Z", sheet="Expenses") is True)
    values(service).clear.assert_called_once_with(spreadsheetId="sheet123",
                                                  range="Expenses!A2:Z", body={})

def test_update_range(sheets, service):
    data = [[1, 2], [3, 4]]
    assert(sheets.update_range("A1:B2", data) is True)
    values(service).update.assert_called_once_with(spreadsheetId="sheet123",
                                                   range="A1:B2",
                                                   valueInputOption="USER_ENTERED",
                                                   body={"values": data})

def test_get_range(sheets, service):
    rows = sheets.get_range("A1:C3", sheet="Sheet1")
    values(service).get.assert_called_once_with(spreadsheetId="sheet123", range="Sheet1!A1:C3")
    assert(rows == [["First Name", "last_name", "Age"], ["Ada", "Lovelace", "36"], ["Alan"]])

def test_get_range_header_row(sheets):
    rows = sheets.get_range("A1:C3", header_row=True)
    assert(rows == [{"firstName": "Ada", "lastName": "Lovelace", "age": "36"},
                    {"firstName": "Alan", "lastName": None, "age": None}])

def test_get_range_header_row_raw(sheets):
    rows = sheets.get_range("A1:C3", header_row="raw")
    assert(rows[0] == {"First Name": "Ada", "last_name": "Lovelace", "Age": "36"})

def test_get_range_empty(sheets, service):
    # an empty range has no 'values' at all
    values(service).get.return_value.execute.return_value = {"range": "Sheet1!A1:C3",
                                                             "majorDimension": "ROWS"}
    assert(sheets.get_range("A1:C3") is None)
    assert(sheets.get_range("A1:C3", header_row=True) is None)

def test_get_sheet_id(sheets, service):
    assert(sheets.get_sheet_id("Expenses") == 1234)
    assert(sheets.get_sheet_id("Sheet1") == 0)
    assert(sheets.get_sheet_id("Missing") is None)
    service.spreadsheets.return_value.get.assert_called_with(spreadsheetId="sheet123")

def test_delete_sheet(sheets, service):
    assert(sheets.delete_sheet("Expenses") is True)
    service.spreadsheets.return_value.batchUpdate.assert_called_once_with(
        spreadsheetId="sheet123",
        body={"requests": [{"deleteSheet": {"sheetId": 1234}}],
              "includeSpreadsheetInResponse": False})

def test_delete_first_sheet(sheets, service):
    assert(sheets.delete_sheet("Sheet1") is True)
    body = service.spreadsheets.return_value.batchUpdate.call_args.kwargs["body"]
    assert(body["requests"] == [{"deleteSheet": {"sheetId": 0}}])

def test_delete_missing_sheet(sheets, service):
    assert(sheets.delete_sheet("Missing") is False)
    assert(not service.spreadsheets.return_value.batchUpdate.called)

def test_http_error_propagates(sheets, service):
    values(service).append.return_value.execute.side_effect = HttpError(
        Response({"status": 403}), b'{"error": {"message": "The caller does not have permission"}}')
    with pytest.raises(HttpError):
        sheets.add_row(["x"])
