from .logging_config import configure_logging
from .settings import ProxyConfig

__all__ = ["ProxyConfig", "configure_logging"]
