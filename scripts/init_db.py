from __future__ import annotations

import logging

from hrms_lite.common.logging_utils import setup_logging
from hrms_lite.database.bootstrap import apply_schema, list_tables
from hrms_lite.main import db_config_from, load_settings

logger = logging.getLogger("hrms_lite.scripts.init_db")


def main() -> None:
    settings = load_settings()
    setup_logging(level=getattr(settings, "LOG_LEVEL", "INFO"))
    db_config = db_config_from(settings)

    apply_schema(db_config)
    tables = list_tables(db_config)
    logger.info("OK: applied schema -> %s (tables=%d)", db_config.describe(), len(tables))


if __name__ == "__main__":
    main()
