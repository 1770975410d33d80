from typing import Optional

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application settings"""
    
    # Database
    DATABASE_URL: str
    
    # API
    API_TITLE: str = "Social API"
    API_VERSION: str = "1.0.0"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    
    # Identity provider ("jwt" or "firebase")
    AUTH_PROVIDER: str = "jwt"
    IDENTITY_JWT_KEY: Optional[str] = None
    IDENTITY_JWT_ALGORITHM: str = "RS256"
    IDENTITY_JWT_ISSUER: Optional[str] = None
    IDENTITY_JWT_AUDIENCE: Optional[str] = None
    
    # Firebase
    FIREBASE_CREDENTIALS_PATH: Optional[str] = None
    FIREBASE_PROJECT_ID: Optional[str] = None
    
    # Feed
    FEED_LIMIT: int = 100
    FEED_CACHE_PATH: str = "/"
    
    class Config:
        env_file = ".env"
        case_sensitive = True

# Create settings instance
settings = Settings()
