"""
Sorting module.
Orders movies by release date or by title, ascending or descending.
"""

from typing import Callable, List, Optional

from loguru import logger

from .models import Movie


class SortEngine:
	"""
	Two sort keys are available: release date and case-insensitive title.
	When both are requested, release date wins and the title key is ignored.
	Python's sort is stable in both directions, so movies with equal keys keep
	their prior relative order.
	"""

	def sort(self, movies: List[Movie], by_date: bool = False, by_title: bool = False, ascending: bool = True) -> List[Movie]:
		"""
		Sort movies in place and return the same list.
		Called on the store's live list this reorders the canonical sequence.
		"""
		key = self._key(by_date, by_title)
		if key is not None:
			movies.sort(key=key, reverse=not ascending)
		return movies

	def sorted_view(self, movies: List[Movie], by_date: bool = False, by_title: bool = False, ascending: bool = True) -> List[Movie]:
		"""Return a sorted copy; the input list is left untouched."""
		return self.sort(list(movies), by_date=by_date, by_title=by_title, ascending=ascending)

	def _key(self, by_date: bool, by_title: bool) -> Optional[Callable[[Movie], object]]:
		if by_date:
			if by_title:
				logger.debug("[Sort] Both date and title requested; sorting by release date only")
			return lambda movie: movie.release_date
		if by_title:
			return lambda movie: movie.title.lower()
		return None
