"""Service settings loaded from the environment.

All configuration uses the DOPAMINE_ROI_ env prefix. Every third-party
integration is optional: an empty key disables that integration and the
service degrades gracefully instead of failing requests.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for the Dopamine ROI assessment service.

    Environment variable prefix: DOPAMINE_ROI_
    """

    service_name: str = "dopamine-roi"
    environment: str = "development"

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False

    # Persistence (empty URL disables all database writes)
    database_url: str = ""
    database_echo: bool = False

    # Transactional email (Resend)
    resend_api_key: str = ""
    resend_api_url: str = "https://api.resend.com/emails"
    email_from: str = "ADHD Founder <hello@adhd-founder.com>"
    confirmation_email_from: str = "Jan from ADHD Founder <hello@adhd-founder.com>"
    contact_inbox: str = "info@adhd-founder.com"
    results_base_url: str = "https://adhd-founder.com/dopamine-roi/results"
    calculator_url: str = "https://adhd-founder.com/dopamine-roi"

    # CRM / mailing list
    crm_api_key: str = ""
    crm_api_url: str = "https://api.convertkit.com/v3"
    crm_category_tag_ids: dict[str, str] = {}

    # Outbound HTTP
    outbound_timeout_seconds: float = 10.0

    model_config = SettingsConfigDict(
        env_prefix="DOPAMINE_ROI_",
        env_file=".env",
        extra="ignore",
    )

    @property
    def persistence_enabled(self) -> bool:
        """Whether a database is configured."""
        return bool(self.database_url)


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
