from .config import AppConfig, load_config, validate_config  # noqa: F401
