import logging
import os
from typing import Any, Dict, Optional

from dotenv import load_dotenv


def configure_env(env_file_name: Optional[str] = None) -> None:
    """
    Configure the batch environment.

    Args:
        env_file_name: Optional environment file name. If None, tries to load from .env.
    """
    if env_file_name is not None:
        load_dotenv(env_file_name, override=True)
        return

    environment = os.getenv("ENV", "debug")

    for env_file in [f".env.{environment}", ".env"]:
        load_dotenv(env_file, override=True)
        if os.getenv("ENV") is not None:
            logging.debug(f"☑️ Loaded {env_file} file successfully")
            break


def env_parameters(prefix: str) -> Dict[str, Any]:
    """
    Lift ``PREFIX_*`` environment variables into a parameter mapping.

    ``BATCH_MAILER_HOST=smtp`` with prefix ``BATCH_`` becomes ``{"mailer_host": "smtp"}``.
    """
    return {
        key[len(prefix):].lower(): value
        for key, value in os.environ.items()
        if key.startswith(prefix) and len(key) > len(prefix)
    }

