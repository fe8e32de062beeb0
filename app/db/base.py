"""
공용 DB 베이스/세션 팩토리.
SessionLocal, engine, Base 정의는 app.db.session 한 곳에서 관리한다.
모델 모듈을 여기서 import 해 두어야 create_all 이 테이블을 모두 만든다.
"""
from app.db.session import engine, SessionLocal, Base
from app.models.question import Question  # noqa: F401
from app.models.user_knowledge import UserKnowledge  # noqa: F401

__all__ = ["engine", "SessionLocal", "Base", "init_db"]


def init_db(bind=None) -> None:
    Base.metadata.create_all(bind=bind or engine)


def reset_db(bind=None) -> None:
    bind = bind or engine
    Base.metadata.drop_all(bind=bind)
    Base.metadata.create_all(bind=bind)
