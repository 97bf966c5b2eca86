from sqlmodel import SQLModel, Session, create_engine

from debt_ledger.core.config import DATABASE_URL, SQL_ECHO

# pool_pre_ping descarta conexiones caídas antes de entregarlas
engine = create_engine(DATABASE_URL, echo=SQL_ECHO, pool_pre_ping=True)

def create_db_and_tables():
    import debt_ledger.models  # noqa: F401  registra las tablas en el metadata
    SQLModel.metadata.create_all(engine)

def get_session():
    with Session(engine) as session:
        yield session
