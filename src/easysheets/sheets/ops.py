import logging
from typing import Any

from googleapiclient.discovery import Resource

from .resources import (AppendValuesResponse, ClearValuesResponse, Spreadsheet,
                        UpdateValuesResponse, ValueInputOption, ValueRange)
from .requests import BatchUpdateRequest, BatchUpdateResponse

logger = logging.getLogger(__name__)

# Each of these is one call on the built sheets service.  Errors from the
# service (googleapiclient.errors.HttpError) are not caught here.

def get_spreadsheet(service: Resource, spreadsheetId: str,
                    fields: str|None = None) -> Spreadsheet:
    """
    Wrapper for calling the get() spreadsheet method.
    See https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/get
    Only spreadsheet and sheet properties, no grid data.
    """
    logger.debug("get spreadsheet %s", spreadsheetId)
    kwargs = {'spreadsheetId': spreadsheetId}
    if fields:
        kwargs['fields'] = fields
    response = service.spreadsheets().get(**kwargs).execute()
    if response:
        return Spreadsheet(**response)
    return Spreadsheet()

def batch_update(service: Resource, spreadsheetId: str,
                 request: BatchUpdateRequest|dict) -> BatchUpdateResponse:
    """
    Wrapper for calling the batchUpdate() spreadsheet method.
    See https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets/batchUpdate
    This is for altering spreadsheet structure (adding/removing sheets etc), not
    data read/write/clear which is done from the values() resource.
    """
    body = request.to_base() if isinstance(request, BatchUpdateRequest) else request
    logger.debug("batchUpdate %s: %s", spreadsheetId, [list(r) for r in body.get('requests', [])])
    response = service.spreadsheets().batchUpdate(spreadsheetId=spreadsheetId, body=body).execute()
    if response:
        return BatchUpdateResponse(**response)
    return BatchUpdateResponse()

def append_values(service: Resource, spreadsheetId: str, range: str,
                  values: list[list[Any]],
                  valueInputOption: str = ValueInputOption.USER_ENTERED) -> AppendValuesResponse:
    """
    Wrapper for calling the append() method on the values resource.
    See https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets.values/append
    The service looks for a table in range and writes values after its last row.
    """
    value_input = ValueInputOption.get(valueInputOption)
    logger.debug("append %d rows to %s", len(values), range)
    response = service.spreadsheets().values().append(spreadsheetId=spreadsheetId,
                                                      range=range,
                                                      valueInputOption=value_input,
                                                      body={'values': values}).execute()
    if response:
        return AppendValuesResponse(**response)
    return AppendValuesResponse()

def update_values(service: Resource, spreadsheetId: str, range: str,
                  values: list[list[Any]],
                  valueInputOption: str = ValueInputOption.USER_ENTERED) -> UpdateValuesResponse:
    """
    Wrapper for calling the update() method on the values resource.
    See https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets.values/update
    """
    value_input = ValueInputOption.get(valueInputOption)
    logger.debug("update %s", range)
    response = service.spreadsheets().values().update(spreadsheetId=spreadsheetId,
                                                      range=range,
                                                      valueInputOption=value_input,
                                                      body={'values': values}).execute()
    if response:
        return UpdateValuesResponse(**response)
    return UpdateValuesResponse()

def clear_values(service: Resource, spreadsheetId: str, range: str) -> ClearValuesResponse:
    """
    Wrapper for calling the clear() method on the values resource.
    See https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets.values/clear
    Values only, formatting stays.
    """
    logger.debug("clear %s", range)
    response = service.spreadsheets().values().clear(spreadsheetId=spreadsheetId,
                                                     range=range, body={}).execute()
    if response:
        return ClearValuesResponse(**response)
    return ClearValuesResponse()

def get_values(service: Resource, spreadsheetId: str, range: str) -> ValueRange:
    """
    Wrapper for calling the get() method on the values resource.
    See https://developers.google.com/sheets/api/reference/rest/v4/spreadsheets.values/get
    An empty range comes back without a 'values' key, that maps to an empty list here.
    """
    logger.debug("get %s", range)
    response = service.spreadsheets().values().get(spreadsheetId=spreadsheetId,
                                                   range=range).execute()
    if response:
        return ValueRange(**response)
    return ValueRange()
