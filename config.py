import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "False") -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


@dataclass
class Settings:
    # Application
    app_name: str = os.getenv("APP_NAME", "ISBN Check Digit")
    app_version: str = os.getenv("APP_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG")

    # HTTP host
    api_host: str = os.getenv("API_HOST", "127.0.0.1")
    api_port: int = int(os.getenv("API_PORT", "8000"))

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "DEBUG" if _env_flag("DEBUG") else "WARNING").upper()

    # Checking behaviour
    output_mode: str = os.getenv("ISBN_CHECK_OUTPUT", "plain").lower()
    strict: bool = _env_flag("ISBN_CHECK_STRICT")


settings = Settings()
