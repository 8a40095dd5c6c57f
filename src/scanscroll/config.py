"""Configuration management via environment variables."""

from typing import Optional

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class SearchSettings(BaseSettings):
    """
    Search cluster connection configuration.
    
    All values are read from environment variables prefixed with SCANSCROLL_.
    A .env file in the current directory is loaded automatically.
    
    Attributes:
        base_url: Root URL of the search cluster
        username: Basic auth user (optional)
        password: Basic auth password (stored securely, optional)
        timeout: Per-request timeout in seconds
    
    Example:
        # Set environment variables:
        # SCANSCROLL_BASE_URL=https://search.internal:9200
        # SCANSCROLL_USERNAME=reader
        # SCANSCROLL_PASSWORD=secret
        
        settings = SearchSettings()
        print(settings.base_url)
    """
    
    base_url: str = "http://localhost:9200"
    username: Optional[str] = None
    password: Optional[SecretStr] = None
    timeout: float = 30.0
    
    model_config = SettingsConfigDict(
        env_prefix="SCANSCROLL_",
        env_file=".env",
        env_file_encoding="utf-8",
    )
    
    @property
    def auth(self) -> Optional[tuple[str, str]]:
        """Basic auth pair for httpx, or None when credentials are incomplete."""
        if self.username is None or self.password is None:
            return None
        return (self.username, self.password.get_secret_value())
