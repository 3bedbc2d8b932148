import os


def _flag(name: str) -> bool:
    return os.getenv(name, "").lower() in ("true", "1", "yes", "on")


def _database_uri() -> str:
    """Resolve the database URL: DATABASE_URL, Railway PG* vars, local DB_* vars, SQLite."""
    url = os.getenv("DATABASE_URL", "").strip()
    if url:
        # Heroku/Railway still hand out the legacy scheme
        if url.startswith("postgres://"):
            url = "postgresql://" + url[len("postgres://"):]
        return url

    if os.getenv("PGHOST"):
        return "postgresql://{user}:{password}@{host}:{port}/{name}?sslmode=require".format(
            user=os.getenv("PGUSER", ""),
            password=os.getenv("PGPASSWORD", ""),
            host=os.getenv("PGHOST"),
            port=os.getenv("PGPORT", "5432"),
            name=os.getenv("PGDATABASE", ""),
        )

    if os.getenv("DB_HOST"):
        uri = "postgresql://{user}:{password}@{host}:{port}/{name}".format(
            user=os.getenv("DB_USER", ""),
            password=os.getenv("DB_PASSWORD", ""),
            host=os.getenv("DB_HOST"),
            port=os.getenv("DB_PORT", "5432"),
            name=os.getenv("DB_NAME", ""),
        )
        if _flag("DB_SSL"):
            uri += "?sslmode=require"
        return uri

    return "sqlite:///assets.db"


def _cors_origins() -> list[str]:
    raw = os.getenv("FRONTEND_URL", "http://localhost:3000")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev_secret_key')
    SQLALCHEMY_DATABASE_URI = _database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    JWT_SECRET = os.getenv('JWT_SECRET', 'dev_jwt_secret')
    TOKEN_EXPIRES_HOURS = int(os.getenv('TOKEN_EXPIRES_HOURS', '24'))

    CORS_ORIGINS = _cors_origins()
    PORT = int(os.getenv('PORT', '5000'))
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

    # Seed account; rotate the password in any real deployment
    DEFAULT_ADMIN_EMAIL = os.getenv('DEFAULT_ADMIN_EMAIL', 'admin@decimetrix.com')
    DEFAULT_ADMIN_NAME = os.getenv('DEFAULT_ADMIN_NAME', 'Administrator')
    DEFAULT_ADMIN_PASSWORD = os.getenv('DEFAULT_ADMIN_PASSWORD', 'Admin123!')
