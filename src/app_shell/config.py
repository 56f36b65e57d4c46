import logging
import os
import sys
from pathlib import Path

from src.rules.models import DealerRules

logger = logging.getLogger(__name__)


def validate_ops_rules(rules: DealerRules, data_dir: Path) -> None:
    """
    Validate operational requirements before startup.

    Exits the process when a requirement is not met.
    """
    ops = rules.ops

    if ops.data_dir_required:
        try:
            data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.critical("Data directory %s is not usable: %s", data_dir, e)
            sys.exit(1)
        if not os.access(data_dir, os.W_OK):
            logger.critical("Data directory %s is not writable", data_dir)
            sys.exit(1)

    missing = [env_var for env_var in ops.required_env if env_var not in os.environ]
    if missing:
        logger.critical("Missing required environment variables: %s", ", ".join(missing))
        sys.exit(1)

    logger.info("Configuration validated")
