from sqlalchemy import create_engine
from sqlalchemy.ext.declarative import declarative_base
from sqlalchemy.orm import sessionmaker, Session
from pydantic_settings import BaseSettings
from functools import lru_cache, wraps
from typing import List
import logging

from core.exceptions import PlayerRegistryException

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    database_url: str = "sqlite:///./players.db"
    log_level: str = "INFO"
    sql_echo: bool = False
    cors_origins: List[str] = ["*"]

    class Config:
        env_file = ".env"


@lru_cache()
def get_settings():
    return Settings()


settings = get_settings()


def build_engine(database_url: str, **kwargs):
    """
    依照 database_url 建立 SQLAlchemy Engine

    SQLite 需要 connect_args={"check_same_thread": False}，
    FastAPI 會在 threadpool 中執行同步 endpoint，同一連線可能跨執行緒使用
    """
    connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}
    return create_engine(
        database_url,
        connect_args=connect_args,
        pool_pre_ping=True,
        echo=settings.sql_echo,
        **kwargs
    )


engine = build_engine(settings.database_url)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    """
    FastAPI dependency：提供 Database Session

    使用 yield 確保 session 在請求結束後會被關閉
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def transactional(func):
    """
    Transaction decorator：讓一次 create / update / delete 成為單一 transaction

    使用方式：
        @transactional
        def delete_player(db: Session, player_id: int):
            player = with_player_lock(player_id, db).first()
            db.delete(player)
            # 不需要手動 commit，decorator 會處理

    如果函式內發生異常：
        - 自動 rollback（不會留下寫到一半的玩家資料）
        - 異常會被重新拋出（讓 API 層轉成 4xx / 500）

    注意：
        - 第一個參數必須是 db: Session
        - 不要在函式內手動 commit
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        db = None
        if args and isinstance(args[0], Session):
            db = args[0]
        elif 'db' in kwargs:
            db = kwargs['db']

        if db is None:
            raise ValueError(
                f"@transactional requires 'db: Session' as first argument, "
                f"but got args={args}, kwargs={kwargs}"
            )

        try:
            result = func(*args, **kwargs)
            db.commit()
            return result
        except PlayerRegistryException:
            # 業務異常（4xx），rollback 即可，不需要 traceback
            db.rollback()
            raise
        except Exception as e:
            logger.error(f"Transaction failed in {func.__name__}: {e}", exc_info=True)
            db.rollback()
            raise

    return wrapper
