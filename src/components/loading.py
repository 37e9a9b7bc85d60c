"""
Result ledger component for the ET0 pipeline.

Appends one row per run to a Google Sheets tab. The ledger is the system of
record, so every failure is raised as LedgerWriteError. Reruns for the same
day append another row; rows are not deduplicated.
"""

from typing import Any, Optional
import httplib2
from google.auth.exceptions import GoogleAuthError
from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import Error as GoogleApiClientError, HttpError

from src.components.base import LoadingComponent
from src.config import Credentials, PipelineConfig
from src.models import Et0Result
from src.utils import get_logger, LedgerWriteError


SHEETS_SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]


class SheetsLedgerComponent(LoadingComponent):
    """Appends Et0Result rows to a Google Sheets spreadsheet."""

    def __init__(
        self,
        config: PipelineConfig,
        credentials: Credentials,
        service: Optional[Any] = None
    ):
        """
        Initialize ledger component.

        Args:
            config: Pipeline configuration
            credentials: Holder of the service-account file path
            service: Optional pre-built Sheets service (injected in tests)
        """
        super().__init__(config)
        self.logger = get_logger(__name__)
        self.credentials = credentials
        self._service = service

        self.stats = {
            "rows_appended": 0,
            "updated_range": None
        }

    @property
    def service(self) -> Any:
        """Sheets v4 service, built on first use."""
        if self._service is None:
            sa_credentials = service_account.Credentials.from_service_account_file(
                self.credentials.ledger_credentials_path, scopes=SHEETS_SCOPES
            )
            self._service = build("sheets", "v4", credentials=sa_credentials, cache_discovery=False)
        return self._service

    def execute(self, result: Et0Result) -> None:
        """
        Append the result as a single row.

        Args:
            result: Computed ET0 result

        Raises:
            LedgerWriteError: If the credentials or the append call fail
        """
        settings = self.config.ledger
        row = result.to_ledger_row()
        self.logger.info(f"Appending row to {settings.target_range}: {row}")

        try:
            response = self.service.spreadsheets().values().append(
                spreadsheetId=settings.spreadsheet_id,
                range=settings.target_range,
                valueInputOption=settings.value_input_option,
                insertDataOption=settings.insert_data_option,
                body={"values": [row]}
            ).execute()
        except HttpError as e:
            self.logger.error(f"Ledger append rejected: {str(e)}")
            raise LedgerWriteError(f"Ledger append failed with HTTP {e.resp.status}: {str(e)}") from e
        except (GoogleAuthError, GoogleApiClientError, httplib2.HttpLib2Error, OSError, ValueError) as e:
            self.logger.error(f"Ledger append failed: {str(e)}")
            raise LedgerWriteError(f"Ledger append failed: {str(e)}") from e

        self.stats["rows_appended"] += 1
        if isinstance(response, dict):
            self.stats["updated_range"] = response.get("updates", {}).get("updatedRange")
        self.logger.info(f"Appended row to ledger ({self.stats['updated_range'] or settings.target_range})")
