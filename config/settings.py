"""Application settings loaded from environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application configuration from environment variables."""

    log_level: str = "INFO"
    tax_year: str = "2024-25"
    # Optional YAML file under config/ that replaces the built-in tables
    rates_config: str = ""

    @property
    def uses_rates_file(self) -> bool:
        """Whether tables come from a YAML file rather than the built-ins."""
        return bool(self.rates_config)

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
