import os
from dotenv import load_dotenv
from sqlalchemy.engine import URL

load_dotenv()  # Carga las variables de entorno desde .env

DB_HOST = os.getenv("DB_HOST", "localhost")
DB_PORT = int(os.getenv("DB_PORT", "5432"))
DB_NAME = os.getenv("DB_NAME", "deudas")
DB_USER = os.getenv("DB_USER")
DB_PASSWORD = os.getenv("DB_PASSWORD")
# "require" cifra la conexión sin validar el certificado del servidor
DB_SSLMODE = os.getenv("DB_SSLMODE", "require")

PORT = int(os.getenv("PORT", "5000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() in {"1", "true", "yes"}
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]


def build_database_url() -> str | URL:
    """URL de conexión: DATABASE_URL si existe, si no se arma con las DB_*."""
    url = os.getenv("DATABASE_URL")
    if url:
        return url

    query = {"sslmode": DB_SSLMODE} if DB_SSLMODE else {}
    return URL.create(
        "postgresql+psycopg2",
        username=DB_USER,
        password=DB_PASSWORD,
        host=DB_HOST,
        port=DB_PORT,
        database=DB_NAME,
        query=query,
    )


DATABASE_URL = build_database_url()
