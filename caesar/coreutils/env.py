from dotenv import find_dotenv, load_dotenv
import os


def load_env() -> bool:
    """Load the .env found from the current working directory upwards."""
    return load_dotenv(find_dotenv(usecwd=True))


load_env()


def env_get(key: str, default: str | None = None) -> str | None:
    """Get environment variable or return default."""
    return os.getenv(key, default)
