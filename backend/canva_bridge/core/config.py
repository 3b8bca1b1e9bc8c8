"""
Application configuration using Pydantic settings
"""
from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict

INSECURE_SESSION_SECRET = "dev-secret-key"
REQUIRED_SETTINGS = ("CANVA_CLIENT_ID", "CANVA_CLIENT_SECRET", "BASE_URL", "REDIRECT_URI")


class ConfigurationError(RuntimeError):
    """Raised at startup when required settings are missing"""


class Settings(BaseSettings):
    """Application settings"""

    # Canva integration credentials (Developer Portal)
    CANVA_CLIENT_ID: Optional[str] = None
    CANVA_CLIENT_SECRET: Optional[str] = None

    # Public URL of this server, used to build the re-auth link handed to agents
    BASE_URL: Optional[str] = None
    # Must match the redirect URL registered for the integration exactly
    REDIRECT_URI: Optional[str] = None

    # Canva endpoints
    CANVA_AUTHORIZE_URL: str = "https://www.canva.com/api/oauth/authorize"
    CANVA_API_BASE_URL: str = "https://api.canva.com/rest/v1"
    CANVA_SCOPE: str = "design:meta:read"

    # Upstream HTTP
    UPSTREAM_TIMEOUT_SECONDS: float = 10.0

    # Session cookie
    SESSION_SECRET: Optional[str] = None
    SESSION_COOKIE_NAME: str = "cedarville-canva-session"
    SESSION_MAX_AGE_SECONDS: int = 24 * 60 * 60
    COOKIE_SECURE: bool = False  # Set to True in production with HTTPS
    COOKIE_SAMESITE: str = "lax"

    # Application
    APP_NAME: str = "Cedarville-Canva Integration"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def session_secret(self) -> str:
        """Secret used to sign the session cookie, falling back to an insecure development key"""
        return self.SESSION_SECRET or INSECURE_SESSION_SECRET

    @property
    def uses_insecure_session_secret(self) -> bool:
        return self.session_secret == INSECURE_SESSION_SECRET

    @property
    def api_base_url(self) -> str:
        return self.CANVA_API_BASE_URL.rstrip("/")

    @property
    def token_url(self) -> str:
        return f"{self.api_base_url}/oauth/token"

    @property
    def login_url(self) -> Optional[str]:
        """Absolute URL of the login route, or None when BASE_URL is unset"""
        if not self.BASE_URL:
            return None
        return f"{self.BASE_URL.rstrip('/')}/oauth/login"

    def missing_required(self) -> List[str]:
        """Names of required settings that are unset or empty"""
        return [name for name in REQUIRED_SETTINGS if not getattr(self, name)]

    def validate_required(self) -> None:
        missing = self.missing_required()
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}"
            )


settings = Settings()
