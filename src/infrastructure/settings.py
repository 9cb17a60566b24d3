"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os

import dotenv

from src.infrastructure.logging.logger import get_app_logger


_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class CajaSettings:
    """Settings for the cash register adapters.

    Attributes:
        auto_create_schema: Create missing tables when wiring repositories.
        currency_symbol: Symbol appended to amounts in the interfaces.
    """

    auto_create_schema: bool = True
    currency_symbol: str = "$"

    @classmethod
    def from_env(cls) -> "CajaSettings":
        """Build settings from environment variables.

        Returns:
            CajaSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        auto_create_schema = cls._parse_bool(
            os.getenv("CAJA_AUTO_CREATE_SCHEMA"),
            default=True,
            logger=logger,
        )
        currency_symbol = os.getenv("CAJA_CURRENCY_SYMBOL", "$").strip()
        return cls(
            auto_create_schema=auto_create_schema,
            currency_symbol=currency_symbol or "$",
        )

    @staticmethod
    def _parse_bool(raw_value: str | None, default: bool, logger) -> bool:
        """Parse a boolean flag from an environment value.

        Args:
            raw_value: Raw environment value.
            default: Value used when the variable is unset or invalid.
            logger: Logger used for warnings.

        Returns:
            bool: Parsed flag.
        """
        if raw_value is None or not raw_value.strip():
            return default
        normalized = raw_value.strip().lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False
        logger.warning(
            f"Invalid boolean value '{raw_value}', using {default}"
        )
        return default


__all__ = ["CajaSettings"]
