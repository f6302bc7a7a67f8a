"""Package configuration."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Package settings."""
    
    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False
    
    # Column width for money stored as text, "-$" plus digits plus ".00"
    MONEY_COLUMN_LENGTH: int = 32
    
    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
