"""
A small convenience wrapper around the Google Sheets API for a single
spreadsheet accessed with a service account.

The service account key is passed base64 encoded.  Authentication is lazy,
the first operation fetches a token and builds the sheets service which is
then reused.  Each operation is one call to the API:

    append rows, read/write/clear a range, add/delete a sheet (tab)

Reading a range can optionally turn a header row into dict keys.
"""
from .access import CredentialsError, ServiceAccountAccess
from .client import EasySheets
from .sheets.a1 import build_range
from .sheets.headers import camel_case, map_rows

__version__ = "0.1.0"
