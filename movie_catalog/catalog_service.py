"""
Catalog service.
Facade exposing the data operations (list, get, add, update, delete) and the
query operations (filter, sort, search) over a single MovieStore.
"""

from typing import List, Optional

from loguru import logger

from .filters import FilterEngine
from .models import Movie, SearchResult
from .movie_store import MovieStore
from .search_engine import SearchEngine
from .sorting import SortEngine


class CatalogService:
	"""
	Every public operation runs inside the store's lock, scoped to that one call.
	Results handed back to callers are new lists, so iterating or reordering
	them does not affect the catalog. sort() is the exception by contract: it
	reorders the canonical sequence itself before returning a copy of it.
	"""

	def __init__(
		self,
		store: Optional[MovieStore] = None,
		filter_engine: Optional[FilterEngine] = None,
		sort_engine: Optional[SortEngine] = None,
		search_engine: Optional[SearchEngine] = None,
	):
		self.store = store if store is not None else MovieStore()
		self.filter_engine = filter_engine or FilterEngine()
		self.sort_engine = sort_engine or SortEngine()
		self.search_engine = search_engine or SearchEngine()
		logger.info(f"[Service] Catalog ready with {len(self.store)} movies")

	# Data operations

	def list_movies(self) -> List[Movie]:
		return self.store.snapshot()

	def get_movie(self, movie_id: int) -> Optional[Movie]:
		return self.store.get(movie_id)

	def add_movie(self, movie: Movie) -> Movie:
		return self.store.add(movie)

	def update_movie(self, movie_id: int, patch: Movie) -> Optional[Movie]:
		return self.store.update(movie_id, patch)

	def delete_movie(self, movie_id: int) -> Optional[Movie]:
		return self.store.delete(movie_id)

	# Query operations

	def filter(self, category: Optional[str] = None, genre: Optional[str] = None, release_year: Optional[int] = 0) -> List[Movie]:
		with self.store.lock:
			return self.filter_engine.filter(self.store.list(), category=category, genre=genre, release_year=release_year)

	def sort(self, by_date: bool = False, by_title: bool = False, ascending: bool = True) -> List[Movie]:
		"""Reorder the catalog itself, then return a snapshot of the new order."""
		with self.store.lock:
			self.sort_engine.sort(self.store.list(), by_date=by_date, by_title=by_title, ascending=ascending)
			logger.info(f"[Service] Catalog sorted | by_date={by_date} by_title={by_title} asc={ascending}")
			return self.store.snapshot()

	def sorted_view(self, by_date: bool = False, by_title: bool = False, ascending: bool = True) -> List[Movie]:
		"""Sorted copy of the catalog; canonical order is left as is."""
		with self.store.lock:
			return self.sort_engine.sorted_view(self.store.list(), by_date=by_date, by_title=by_title, ascending=ascending)

	def search(self, text: str) -> List[Movie]:
		with self.store.lock:
			return self.search_engine.search(self.store.list(), text)

	def search_scored(self, text: str) -> List[SearchResult]:
		with self.store.lock:
			return self.search_engine.search_scored(self.store.list(), text)
