"""Thin handle over the Google Sheets v4 service."""

import json
from typing import Any, Dict, List, Optional

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]


class SheetsClient:
    """
    Authenticated access to one spreadsheet.

    Built once per process; every adapter call goes through the same
    service object instead of re-authenticating.
    """

    def __init__(self, service, spreadsheet_id: str):
        self._service = service
        self.spreadsheet_id = spreadsheet_id

    @classmethod
    def from_config(cls, config) -> Optional["SheetsClient"]:
        spreadsheet_id = config.get("GOOGLE_SHEETS_ID")
        inline_json = config.get("GOOGLE_SERVICE_ACCOUNT_JSON")
        key_file = config.get("GOOGLE_APPLICATION_CREDENTIALS")
        if not spreadsheet_id or not (inline_json or key_file):
            return None

        from google.oauth2 import service_account
        from googleapiclient.discovery import build

        if inline_json:
            credentials = service_account.Credentials.from_service_account_info(
                json.loads(inline_json), scopes=SCOPES
            )
        else:
            credentials = service_account.Credentials.from_service_account_file(key_file, scopes=SCOPES)

        service = build("sheets", "v4", credentials=credentials, cache_discovery=False)
        return cls(service, spreadsheet_id)

    def get_metadata(self) -> Dict[str, Any]:
        return self._service.spreadsheets().get(spreadsheetId=self.spreadsheet_id).execute()

    def get_values(self, a1_range: str, unformatted: bool = False) -> List[List[Any]]:
        params = {"spreadsheetId": self.spreadsheet_id, "range": a1_range}
        if unformatted:
            params["valueRenderOption"] = "UNFORMATTED_VALUE"
        result = self._service.spreadsheets().values().get(**params).execute()
        return result.get("values", [])

    def update_values(self, a1_range: str, values: List[List[Any]]) -> None:
        self._service.spreadsheets().values().update(
            spreadsheetId=self.spreadsheet_id,
            range=a1_range,
            valueInputOption="RAW",
            body={"values": values},
        ).execute()

    def append_values(self, a1_range: str, values: List[List[Any]]) -> None:
        self._service.spreadsheets().values().append(
            spreadsheetId=self.spreadsheet_id,
            range=a1_range,
            valueInputOption="RAW",
            insertDataOption="INSERT_ROWS",
            body={"values": values, "majorDimension": "ROWS"},
        ).execute()

    def batch_update(self, requests: List[Dict[str, Any]]) -> None:
        self._service.spreadsheets().batchUpdate(
            spreadsheetId=self.spreadsheet_id,
            body={"requests": requests},
        ).execute()
