from fluentassert.config.config import Config

__all__ = ["Config"]
