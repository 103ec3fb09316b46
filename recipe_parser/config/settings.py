from typing import Literal, Union
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Extraction engine settings with environment variable support"""
    
    # HTTP fetch
    fetch_timeout_ms: int = 10000
    user_agent: str = "RecipeParser/1.0"
    accept_header: str = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
    follow_redirects: bool = True
    
    # Logfire
    service_name: str = "recipe-parser"
    logfire_send: Union[bool, Literal["if-token-present"]] = "if-token-present"
    logfire_console: bool = False
    
    model_config = SettingsConfigDict(
        env_prefix="RECIPE_PARSER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,  # Allow RECIPE_PARSER_USER_AGENT or recipe_parser_user_agent
        extra="ignore",
    )


# Create singleton instance
settings = Settings()
