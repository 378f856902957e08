from __future__ import annotations

from sqlalchemy import Boolean, Column, Date, Integer, String, Text, false

from tasktracker.domain.validation import TITLE_MAX_LENGTH

from .db import Base


class TaskModel(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True)
    title = Column(String(TITLE_MAX_LENGTH), nullable=False, index=True)
    description = Column(Text, nullable=True)
    due_date = Column(Date, nullable=True)
    done = Column(Boolean, nullable=False, default=False, server_default=false())
