from typing import Any, Dict, Optional

import os
import sys

from fast_batch import config
from fast_batch.application import Application
from fast_batch.utils.env_utils import configure_env, env_parameters
from fast_batch.utils.logging import setup_logging


def boot(*,
    parameters: Optional[Dict[str, Any]] = None,
    env_file_name: Optional[str] = None,
    log_file_name: Optional[str] = None,
):
    """
    Sets up the batch environment.
    - Loads environment variables
    - Sets up logging
    - Registers the parameters batches can read

    Args:
        parameters: Parameters exposed to batches. If None, ``BATCH_*`` environment variables are used.
        env_file_name: Optional environment file name.
        log_file_name: Optional log file name (defaults to LOG_FILE_NAME or app.log).
    """
    # Ensure project root is importable so app commands can be resolved
    project_root = os.environ.get("PROJECT_ROOT") or os.getcwd()
    if project_root and project_root not in sys.path:
        sys.path.insert(0, project_root)

    app = Application()
    if app.is_booted():
        return

    app.set_boot_args(
        parameters=parameters,
        env_file_name=env_file_name,
        log_file_name=log_file_name,
    )

    configure_env(env_file_name)
    setup_logging(log_file_name)

    if parameters is None:
        parameters = env_parameters(config.BATCH_PARAMETER_PREFIX)
    app.set_parameters(parameters)
