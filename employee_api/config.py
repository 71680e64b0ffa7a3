from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application configuration"""

    # API Settings
    app_name: str = "Employee API"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server Settings
    host: str = "0.0.0.0"
    port: int = 8080

    # Database Settings
    database_url: str = "sqlite:///./data/employees.db"
    db_pool_size: int = 20
    db_pool_timeout_seconds: int = 30
    db_pool_recycle_seconds: int = 1800
    sql_echo: bool = False

    # Cache Settings (sizes are entry counts, TTLs are minutes)
    cache_employee_max_size: int = 50000
    cache_employee_ttl_minutes: float = 5
    cache_department_max_size: int = 10
    cache_department_ttl_minutes: float = 30
    cache_department_list_ttl_minutes: float = 30
    cache_search_max_size: int = 5000
    cache_search_ttl_minutes: float = 2

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    def validate_cache_settings(self) -> None:
        """
        Check that every cache is given a usable size and TTL.

        Raises:
            ConfigurationError: If a size or TTL is not positive
        """
        sizes = {
            "cache_employee_max_size": self.cache_employee_max_size,
            "cache_department_max_size": self.cache_department_max_size,
            "cache_search_max_size": self.cache_search_max_size,
        }
        ttls = {
            "cache_employee_ttl_minutes": self.cache_employee_ttl_minutes,
            "cache_department_ttl_minutes": self.cache_department_ttl_minutes,
            "cache_department_list_ttl_minutes": self.cache_department_list_ttl_minutes,
            "cache_search_ttl_minutes": self.cache_search_ttl_minutes,
        }

        for field_name, value in sizes.items():
            if value < 1:
                raise ConfigurationError(
                    f"{field_name} must be at least 1, got {value}",
                    {"field": field_name}
                )

        for field_name, value in ttls.items():
            if value <= 0:
                raise ConfigurationError(
                    f"{field_name} must be positive, got {value}",
                    {"field": field_name}
                )


settings = Settings()
