from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from cvking.core import config

DATABASE_URL = config.DATABASE_URL


def _connect_args(url: str) -> dict:
    if url.startswith("mysql"):
        return {"connect_timeout": config.DB_CONNECT_TIMEOUT}
    return {}


engine = create_engine(DATABASE_URL, pool_pre_ping=True, connect_args=_connect_args(DATABASE_URL))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
