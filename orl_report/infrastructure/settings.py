"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path

import dotenv

from orl_report.infrastructure.logging.logger import get_app_logger
from orl_report.utils.utils import get_project_root

DEFAULT_API_URL = "https://api.apaleo.com"
DEFAULT_APP_URL = "https://app.apaleo.com"
DEFAULT_PAGE_SIZE = 1000
DEFAULT_TIMEOUT_SECONDS = 60.0


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value.strip()


@dataclass(frozen=True)
class ApaleoSettings:
    """Settings for the gross transactions API and report output.

    Attributes:
        api_base_url: Base URL of the REST API.
        app_base_url: Base URL of the web app used for folio links.
        access_token: Bearer token for the REST API.
        page_size: Number of transactions requested per page.
        timeout_seconds: Timeout applied to each HTTP request.
        output_path: Workbook path written by the CLI.
    """

    access_token: str
    api_base_url: str = DEFAULT_API_URL
    app_base_url: str = DEFAULT_APP_URL
    page_size: int = DEFAULT_PAGE_SIZE
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    output_path: Path | None = None

    @classmethod
    def from_env(cls) -> "ApaleoSettings":
        """Build settings from environment variables.

        Returns:
            ApaleoSettings: Settings sourced from environment variables.
        """
        access_token = _get_env_var("APALEO_ACCESS_TOKEN")
        logger = get_app_logger()
        return cls(
            access_token=access_token,
            api_base_url=cls._normalize_url(
                os.getenv("APALEO_API_URL", DEFAULT_API_URL)
            ),
            app_base_url=cls._normalize_url(
                os.getenv("APALEO_APP_URL", DEFAULT_APP_URL)
            ),
            page_size=cls._read_positive_int(
                "APALEO_PAGE_SIZE",
                DEFAULT_PAGE_SIZE,
                logger,
            ),
            timeout_seconds=float(
                os.getenv("APALEO_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS)
            ),
            output_path=cls._resolve_output_path(
                os.getenv("ORL_REPORT_OUTPUT")
            ),
        )

    @staticmethod
    def _normalize_url(raw_url: str) -> str:
        return raw_url.strip().rstrip("/")

    @staticmethod
    def _read_positive_int(name: str, default: int, logger) -> int:
        """Read a positive integer, falling back to the default.

        Args:
            name: Environment variable name.
            default: Value used when unset or invalid.
            logger: Logger used for warnings.

        Returns:
            int: Parsed value or the default.
        """
        raw = os.getenv(name)
        if not raw:
            return default
        try:
            value = int(raw)
        except ValueError:
            logger.warning(f"Invalid {name}={raw!r}; using {default}")
            return default
        if value <= 0:
            logger.warning(f"Invalid {name}={raw!r}; using {default}")
            return default
        return value

    @staticmethod
    def _resolve_output_path(raw_path: str | None) -> Path:
        if raw_path:
            return Path(raw_path).expanduser().resolve()
        return get_project_root() / "reports" / "orl_report.xlsx"


__all__ = ["ApaleoSettings"]
