# app/reset_db.py
# 관리용: 모든 문제/기록을 지우고 테이블을 다시 만든다.
#   python -m app.reset_db
import logging

from app.config import settings
from app.db.base import reset_db

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(level=settings.log_level.upper())
    reset_db()
    logger.info("database reset: %s", settings.database_url.split("@")[-1])


if __name__ == "__main__":
    main()
