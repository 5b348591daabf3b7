# __init__ for validate utils


from .core import check_no_sentinels, validate_tidy_schema, validate_buckets

__all__ = [
    "check_no_sentinels",
    "validate_tidy_schema",
    "validate_buckets",
]
