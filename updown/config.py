"""Client configuration from environment variables."""
from pydantic_settings import BaseSettings

from . import __version__

DEFAULT_BASE_URL = "https://updown.io/api/"
DEFAULT_USER_AGENT = f"python-updown v{__version__}"


class Settings(BaseSettings):
    """Client settings loaded from UPDOWN_* environment variables."""
    
    # API key sent as X-API-KEY on every request
    api_key: str = ""
    
    # Root of the updown.io API, must end with a slash
    base_url: str = DEFAULT_BASE_URL
    
    # Timeout applied to the default HTTP client
    timeout_seconds: float = 30
    
    user_agent: str = DEFAULT_USER_AGENT
    
    class Config:
        env_prefix = "UPDOWN_"
        case_sensitive = False


settings = Settings()
