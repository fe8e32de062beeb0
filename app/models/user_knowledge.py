# app/models/user_knowledge.py
# 사용자가 "안다"고 표시한 카테고리 기록 (append-only)
from sqlalchemy import Column, Integer, String, DateTime, Index, func
from app.db.session import Base

class UserKnowledge(Base):
    __tablename__ = "user_knowledge"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(String(64), nullable=False)
    category = Column(String(100), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    __table_args__ = (
        Index("ix_user_knowledge_user_id_category", "user_id", "category"),
    )
