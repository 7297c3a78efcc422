# =============================================================
# 🗄️ DATABASE — Configuration SQLModel (DD Task)
# =============================================================
from sqlmodel import SQLModel, Session, create_engine
from sqlalchemy import event, text
from dotenv import load_dotenv
import os
import time
import logging

# Charger les variables d'environnement
load_dotenv()

logger = logging.getLogger("uvicorn")

RAW_DB_URL = (os.getenv("DATABASE_URL") or "sqlite:///database.db").strip()


def _normalize_pg_url(url: str) -> str:
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql+psycopg2://", 1)
    elif url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+psycopg2://", 1)
    return url


ENGINE_KW = {"pool_pre_ping": True, "pool_recycle": 1800}


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def register_sqlite_functions(sqlite_engine) -> None:
    """Remplace lower() de SQLite (ASCII seulement) par str.lower."""

    @event.listens_for(sqlite_engine, "connect")
    def _on_connect(dbapi_conn, _record):
        dbapi_conn.create_function("lower", 1, _unicode_lower, deterministic=True)


def build_engine(url: str = RAW_DB_URL, **kw):
    options = {**ENGINE_KW, **kw}
    if "postgres" in url:
        return create_engine(_normalize_pg_url(url), connect_args={"sslmode": "require"}, **options)
    if url.startswith("sqlite"):
        # Les requêtes FastAPI tournent dans un threadpool
        sqlite_engine = create_engine(url, connect_args={"check_same_thread": False}, **options)
        register_sqlite_functions(sqlite_engine)
        return sqlite_engine
    return create_engine(url, **options)


engine = build_engine()


def init_db_with_retry(max_attempts: int = 12, delay_sec: int = 5) -> bool:
    """Essaye plusieurs connexions avant de créer les tables."""
    for attempt in range(1, max_attempts + 1):
        try:
            with engine.begin() as conn:
                conn.execute(text("SELECT 1"))
                SQLModel.metadata.create_all(bind=conn)
            logger.info(f"✅ Database ready (attempt {attempt}/{max_attempts}).")
            return True
        except Exception as e:
            logger.warning(f"⚠️ DB not ready (attempt {attempt}/{max_attempts}): {e}")
            if attempt < max_attempts:
                time.sleep(delay_sec)
    logger.error(f"❌ Database still unreachable after {max_attempts} attempts.")
    return False


def get_session():
    with Session(engine) as session:
        yield session
