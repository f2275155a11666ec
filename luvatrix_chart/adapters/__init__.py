from .normalize import coerce_values, normalize_named_series

__all__ = ["coerce_values", "normalize_named_series"]
