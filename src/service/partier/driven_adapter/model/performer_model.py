from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class PerformerModel(Base):
    __tablename__ = 'performer'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    event_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    image_url: Mapped[str] = mapped_column(String(1024), nullable=False)
    time: Mapped[str] = mapped_column(String(64), nullable=False)
    is_headliner: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
