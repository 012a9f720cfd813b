from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

Base = declarative_base()

def create_session_factory(database_url: str, create_tables: bool = True) -> sessionmaker:
    """Engine and session factory for the SQL-backed store"""
    connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}
    engine = create_engine(database_url, connect_args=connect_args)

    if create_tables:
        # Models must be registered on Base before create_all
        import stayhub.models  # noqa: F401
        Base.metadata.create_all(bind=engine)

    return sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
