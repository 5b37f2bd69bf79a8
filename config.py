"""Application configuration via environment variables."""

from pydantic import BaseModel, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """App settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Shalom endpoints
    shalom_api_url: str = "https://servicesweb.shalomcontrol.com/api/v1/web"
    shalom_payments_url: str = "https://servicespayment.shalomcontrol.com/api/v1/web"
    shalom_pro_url: str = "https://pro.shalom.pe"
    request_timeout: float = 30.0

    # Browser-like header profile expected by the Shalom web APIs
    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    )
    accept_language: str = "es-ES,es;q=0.9"
    origin: str = "https://shalom.pe"
    tracking_referer: str = "https://rastrea.shalom.pe/"
    payments_referer: str = "https://pagalo.shalom.pe/"
    pro_referer: str = "https://pro.shalom.pe/"

    # Agency search presentation
    agency_result_cap: int = 3
    agency_overflow_preview: int = 5

    # Mock APIs (for demo/development)
    use_mock_apis: bool = False

    # App
    log_level: str = "INFO"
    app_version: str = "1.0.3"


class HeaderProfile(BaseModel):
    """Static request headers shared by every Shalom call."""

    model_config = ConfigDict(frozen=True)

    user_agent: str
    accept_language: str
    origin: str

    @classmethod
    def from_settings(cls, s: Settings) -> "HeaderProfile":
        return cls(
            user_agent=s.user_agent,
            accept_language=s.accept_language,
            origin=s.origin,
        )

    def build(self, referer: str | None = None, **extra: str) -> dict[str, str]:
        """Return request headers, optionally with a Referer and extra entries."""
        headers = {
            "Accept": "application/json, text/plain, */*",
            "Accept-Language": self.accept_language,
            "User-Agent": self.user_agent,
            "Origin": self.origin,
            "Connection": "keep-alive",
        }
        if referer:
            headers["Referer"] = referer
        headers.update(extra)
        return headers


settings = Settings()
