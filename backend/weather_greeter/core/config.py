from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Google Places (New) API key, used for nearby search, details and photo media
    GOOGLE_MAPS_API_KEY: str = ""

    LOGGER: int = 20
    LOG_DIRECTORY: str = "logs"

    # Upstream endpoints
    PLACES_BASE_URL: str = "https://places.googleapis.com/v1"
    OPEN_METEO_URL: str = "https://api.open-meteo.com/v1/forecast"
    NOMINATIM_URL: str = "https://nominatim.openstreetmap.org/reverse"
    NOMINATIM_USER_AGENT: str = "WeatherGreeter/1.0"
    HTTP_TIMEOUT: float = 10.0

    # LLM Provider Selection
    LLM_PROVIDER: str = "mistral"  # Options: mistral, openai, anthropic, groq

    # Mistral Configuration
    MISTRAL_API_KEY: str = "your-key-here"
    MISTRAL_MODEL: str = "mistral-tiny"

    # OpenAI Configuration
    OPENAI_API_KEY: str = "your-key-here"
    OPENAI_MODEL: str = "gpt-3.5-turbo"

    # Anthropic Configuration
    ANTHROPIC_API_KEY: str = "your-key-here"
    ANTHROPIC_MODEL: str = "claude-3-haiku-20240307"

    # Groq Configuration
    GROQ_API_KEY: str = "your-key-here"
    GROQ_MODEL: str = "llama3-8b-8192"

    model_config = SettingsConfigDict(
        # Look for .env in the current folder OR the parent folder
        env_file=(".env", "../.env"),
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
