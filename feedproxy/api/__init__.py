from .routes import create_feed_blueprint, register_error_handlers

__all__ = ["create_feed_blueprint", "register_error_handlers"]
