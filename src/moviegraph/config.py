"""
Configuration management for the moviegraph server
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Settings
    api_host: str = "0.0.0.0"
    api_port: int = 5004
    api_reload: bool = False
    cors_origins: list[str] = ["*"]

    # GraphQL
    graphql_path: str = "/graphql"
    graphiql: bool = True  # Serve the GraphiQL explorer on GET

    # Seed data (JSON file replacing the built-in seed)
    seed_data_path: str | None = None

    # Environment
    environment: str = "development"
    debug: bool = True
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "MOVIEGRAPH_"
        case_sensitive = False


# Global settings instance
settings = Settings()
