from navigator.middleware.retry import retry_model

__all__ = ["retry_model"]
