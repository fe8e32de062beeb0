# app/models/question.py
from sqlalchemy import Column, Integer, String, Boolean, Text, DateTime, func
from app.db.session import Base

class Question(Base):
    __tablename__ = "questions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    question = Column(Text, nullable=False)          # 제목 (unique 제약 없음)
    description = Column(Text, nullable=False, default="")
    constraints = Column(Text, nullable=False, default="")
    hint = Column(Text, nullable=False, default="")
    solution = Column(Text, nullable=False, default="")
    code_solution = Column(Text, nullable=False, default="")
    category = Column(String(100), nullable=False, index=True)
    trivia = Column(Text, nullable=False, default="")
    shown = Column(Boolean, nullable=False, default=False, index=True)  # true -> false 로 되돌리지 않음
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
