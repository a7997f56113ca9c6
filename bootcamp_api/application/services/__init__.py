from .advanced_query import BootcampQuery, parse_advanced_query

__all__ = ["BootcampQuery", "parse_advanced_query"]
