from sqlalchemy import Boolean, Column, Text, Uuid

from infrastructure.sqlalchemy.session.db import Base


class TaskModel(Base):
    __tablename__ = "tasks"

    # Uuid: CHAR(32) hex en SQLite y uuid nativo en Postgres, como UUIDField de Peewee.
    id = Column(Uuid(as_uuid=True), primary_key=True)
    title = Column(Text, nullable=False, default="")
    description = Column(Text, nullable=False, default="")
    is_completed = Column(Boolean, nullable=False, default=False)
