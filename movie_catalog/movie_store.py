"""
In-memory record store.
Owns the canonical ordered list of movies and assigns identifiers.
"""

import threading  # per-operation critical sections
from typing import Iterator, List, Optional

from loguru import logger

from .exceptions import ConsistencyError
from .models import Movie, MUTABLE_FIELDS


class MovieStore:
	"""
	Ordered collection of movies, the single mutable resource of the catalog.

	Identifiers come from a monotonic counter, so an id is never handed out twice
	even after deletions. The list returned by list() is the live canonical
	sequence: sorting or removing from it changes the store.
	"""

	def __init__(self, movies: Optional[List[Movie]] = None):
		self.lock = threading.RLock()  # shared with the engines through CatalogService
		self._movies: List[Movie] = []
		self._next_id = 0
		self._seed(list(movies or []))
		logger.info(f"[Store] Initialized with {len(self._movies)} movies | next_id={self._next_id}")

	def _seed(self, movies: List[Movie]):
		# Seed records keep their own id when they have one; the rest are numbered after the largest
		seen = set()
		for movie in movies:
			if movie.id < 0:
				continue
			if movie.id in seen:
				raise ConsistencyError(movie.id)
			seen.add(movie.id)
		self._next_id = max(seen) + 1 if seen else 0
		for movie in movies:
			if movie.id < 0:
				movie.id = self._next_id
				self._next_id += 1
			self._movies.append(movie)

	def _find_index(self, movie_id: int) -> Optional[int]:
		for idx, movie in enumerate(self._movies):
			if movie.id == movie_id:
				return idx
		return None

	def list(self) -> List[Movie]:
		"""Live view of the canonical sequence."""
		return self._movies

	def snapshot(self) -> List[Movie]:
		"""New list holding the same movie references, in canonical order."""
		with self.lock:
			return list(self._movies)

	def get(self, movie_id: int) -> Optional[Movie]:
		"""Return the first movie with the given id, or None."""
		with self.lock:
			idx = self._find_index(movie_id)
			return self._movies[idx] if idx is not None else None

	def add(self, movie: Movie) -> Movie:
		"""Assign the next id to movie and append it."""
		with self.lock:
			movie_id = self._next_id
			if self._find_index(movie_id) is not None:
				raise ConsistencyError(movie_id, f"Id {movie_id} already assigned; counter out of sync")
			movie.id = movie_id
			self._movies.append(movie)
			self._next_id += 1
			logger.info(f"[Store] Added movie id={movie.id} title='{movie.title}'")
			return movie

	def update(self, movie_id: int, patch: Movie) -> Optional[Movie]:
		"""
		Overwrite every field except the id of the stored movie with patch's values.
		The stored object is updated in place. Returns None when no movie has movie_id.
		"""
		with self.lock:
			idx = self._find_index(movie_id)
			if idx is None:
				logger.debug(f"[Store] Update skipped, no movie with id={movie_id}")
				return None
			existing = self._movies[idx]
			for name in MUTABLE_FIELDS:
				setattr(existing, name, getattr(patch, name))
			logger.info(f"[Store] Updated movie id={movie_id}")
			return existing

	def delete(self, movie_id: int) -> Optional[Movie]:
		"""Remove the first movie with movie_id and return it, or None when absent."""
		with self.lock:
			idx = self._find_index(movie_id)
			if idx is None:
				logger.debug(f"[Store] Delete skipped, no movie with id={movie_id}")
				return None
			removed = self._movies.pop(idx)
			logger.info(f"[Store] Deleted movie id={movie_id}")
			return removed

	def __len__(self) -> int:
		return len(self._movies)

	def __iter__(self) -> Iterator[Movie]:
		return iter(self._movies)
