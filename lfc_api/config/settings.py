"""Settings for the LFC API, read from the environment.

Everything the REST app, the GraphQL endpoint, the database layer and the
`lfc` CLI need to know about their surroundings is declared once here:
where to listen, which prefixes to mount under, which database to open,
how large a page may be and where logs go.

Values come from (highest priority first):
1. Environment variables, matched case-insensitively (MAX_PAGE_SIZE=50)
2. A .env file in the working directory
3. The defaults below

List values such as CORS_ORIGINS are given as JSON: '["https://example.com"]'.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Typed view of the environment.

    Read it through the module-level `settings` instance:
    `settings.database_url`, `settings.api_prefix`, ...
    Tests build their own with `Settings(_env_file=None)`.
    """

    # Pydantic configuration for settings behavior
    model_config = SettingsConfigDict(
        env_file=".env",  # Load from .env file in project root
        env_file_encoding="utf-8",  # Handle unicode characters in env file
        case_sensitive=False,  # Allow DATABASE_URL or database_url
    )

    # API Configuration - FastAPI web server settings
    api_host: str = "127.0.0.1"  # Host to bind server (localhost for development)
    api_port: int = 8989  # Port number for API server
    api_reload: bool = False  # Auto-reload on code changes (True for development)
    api_version: str = "1.0"  # Sent back in the X-API-Version header

    # Routing - where each front end is mounted
    api_prefix: str = "/api/v1"  # Prefix for every REST collection
    docs_url: str = "/api-docs"  # Swagger UI location
    graphql_path: str = "/graphql"  # GraphQL endpoint
    graphql_ide: bool = True  # Serve GraphiQL on GET requests to the GraphQL endpoint

    # CORS - browsers calling the API from other origins
    cors_origins: list[str] = ["*"]

    # Database Configuration - SQLAlchemy connection settings
    database_url: str = "sqlite:///data/database/lfc.db"  # Database connection string
    database_pool_size: int = 5  # Connection pool size (max concurrent connections)
    database_echo: bool = False  # Log all SQL queries (True for debugging)

    # Pagination - applies to REST limit/offset and GraphQL page/pageSize
    default_page_size: int = 100
    max_page_size: int = 1000

    # Logging Configuration - Application logging settings
    log_level: str = "INFO"  # Log level (DEBUG, INFO, WARNING, ERROR)
    log_file: Path = Path("data/logs/lfc_api.log")  # Log file location

    # Seed data loaded by `lfc db seed` when no file is given
    seed_file: Path = Path(__file__).parent.parent / "data" / "seed.json"


# Global settings instance - import this rather than building new Settings objects
# Example: from lfc_api.config.settings import settings; print(settings.database_url)
settings = Settings()
