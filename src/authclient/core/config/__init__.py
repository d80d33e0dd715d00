from authclient.core.config.app_config import ClientConfig, LogLevel, load_config

__all__ = ["ClientConfig", "LogLevel", "load_config"]
