from typing import Any, Callable, Optional

from flask import current_app

from dubytrack.services.sheets.adapter import SheetsAdapter
from dubytrack.services.sheets.client import SheetsClient

EXTENSION_KEY = "duby_sheets"


class SheetsMirror:
    """
    Flask extension holding the spreadsheet adapter for an app.

    The mirror is disabled when no spreadsheet id or credentials are
    configured; `adapter` is then None and guarded calls do nothing.
    """

    def __init__(self, app=None):
        if app is not None:
            self.init_app(app)

    def init_app(self, app, client: Optional[SheetsClient] = None):
        if client is None:
            try:
                client = SheetsClient.from_config(app.config)
            except Exception as e:
                app.logger.warning("Spreadsheet mirror disabled: %s", e)
                client = None

        adapter = None
        if client is not None:
            adapter = SheetsAdapter(client, template_name=app.config.get("SHEETS_TEMPLATE_NAME", "UserTemplate"))
        app.extensions[EXTENSION_KEY] = adapter

    @property
    def adapter(self) -> Optional[SheetsAdapter]:
        return current_app.extensions.get(EXTENSION_KEY)

    @property
    def enabled(self) -> bool:
        return self.adapter is not None

    def guarded(self, operation: str, fn: Callable[[SheetsAdapter], Any]) -> Any:
        """Run `fn(adapter)`; any failure is logged and dropped."""
        adapter = self.adapter
        if adapter is None:
            return None
        try:
            return fn(adapter)
        except Exception as e:
            current_app.logger.warning("Spreadsheet mirror '%s' failed: %s", operation, e)
            return None
