from pydantic_settings import BaseSettings, SettingsConfigDict


# -----------------------------------------------------------------------------
# Settings
# -----------------------------------------------------------------------------
class Settings(BaseSettings):
    """
    HAL helper settings managed by Pydantic.
    Reads HAL_-prefixed environment variables and/or .env file.
    """
    # Page navigation query parameters
    PAGE_PARAM: str = "page"
    SIZE_PARAM: str = "size"

    # Number of the first page (0- or 1-based numbering)
    FIRST_PAGE: int = 1

    model_config = SettingsConfigDict(
        env_prefix="HAL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
        )

settings = Settings()
