"""Modulo per la lettura dei feed."""

from .feeds import FeedError, parse_match, parse_operation, read_matches, read_operations

__all__ = ["FeedError", "parse_match", "parse_operation", "read_matches", "read_operations"]
