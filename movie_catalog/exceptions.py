"""
Exceptions raised by the catalog core.
Business conditions (no match, unknown id) are never errors; only broken invariants are.
"""


class CatalogError(Exception):
	"""Base class for catalog errors."""


class ConsistencyError(CatalogError):
	"""Raised when the store detects a duplicate identifier."""

	def __init__(self, movie_id: int, message: str = ''):
		self.movie_id = movie_id  # offending identifier
		super().__init__(message or f"Duplicate movie id in store: {movie_id}")
