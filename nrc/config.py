"""
Application configuration settings loaded from environment variables.
Uses pydantic_settings for validation and type conversion.
"""
from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    """
    Application settings class with environment variable validation.
    
    Attributes:
        database_url: SQLAlchemy connection string
        environment: Deployment environment (development or production)
        log_level: Root logging level
        api_prefix: Prefix under which the resource routers are mounted
        
        # Frontend settings
        frontend_url: URL of the dashboard application
        cors_origins: Additional origins allowed to call the API
        
        # Domain settings
        high_risk_score_threshold: Risk score above which a registration raises an alert
        seed_sample_data: Whether to insert the sample hospital, beds and center on startup
    """
    # Database settings
    database_url: str = "sqlite:///./nrc.db"

    # Runtime settings
    environment: str = "development"
    log_level: str = "INFO"
    api_prefix: str = "/api"

    # Frontend settings
    frontend_url: str = "http://localhost:5173"
    cors_origins: List[str] = ["http://localhost:3000"]

    # Domain settings
    high_risk_score_threshold: float = 80
    seed_sample_data: bool = True

    class Config:
        """Configuration for environment variables loading"""
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

# Create settings instance
settings = Settings()
