from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
import os
from dotenv import load_dotenv

# Chargement des variables d'environnement
load_dotenv()

# ============================== #

# URL de la base de données (SQLite locale par défaut, comme l'application desktop)
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./ecole.db")
DB_ECHO = os.getenv("DB_ECHO", "false").lower() in ("1", "true", "yes")


def build_engine(url: str = DATABASE_URL, echo: bool = DB_ECHO, **kwargs) -> Engine:
    """ Crée un moteur SQLAlchemy pour l'URL donnée """
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    else:
        kwargs.setdefault("pool_pre_ping", True)  # vérifie la connexion avant usage
        kwargs.setdefault("pool_recycle", 3600)   # recyclage des connexions (1 heure)

    return create_engine(url, echo=echo, **kwargs)


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """ SQLite n'applique les clés étrangères que si on le demande explicitement """
    if type(dbapi_connection).__module__.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


# Moteur SQLAlchemy
engine = build_engine()

# Fabrique de sessions
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Dépendance de session
def get_db():
    """ Crée une session de base de données et la libère à la fin de la requête """
    db = SessionLocal() # nouvelle session

    try:
        yield db  # session transmise à l'endpoint

    finally:
        db.close() # nettoyage après la requête
