"""
Filtering module.
Applies optional category, genre and release-year predicates as one conjunction.
"""

from typing import Iterable, List, Optional

from loguru import logger

from .models import Movie


class FilterEngine:
	"""
	Equality filters over category, genre (multi-valued) and release year.

	An unset parameter (None, empty string, or a year <= 0) does not filter.
	All set predicates must hold for a movie to be kept; input order is preserved.
	"""

	def filter(
		self,
		movies: Iterable[Movie],
		category: Optional[str] = None,
		genre: Optional[str] = None,
		release_year: Optional[int] = 0,
	) -> List[Movie]:
		wanted_category = category.lower() if category else None
		wanted_genre = genre.lower() if genre else None
		wanted_year = release_year if release_year and release_year > 0 else None

		def matches(movie: Movie) -> bool:
			# Category: case-insensitive exact equality
			if wanted_category is not None and (movie.category or '').lower() != wanted_category:
				return False
			# Genre: equality with any genre entry, not substring
			if wanted_genre is not None and wanted_genre not in (g.lower() for g in movie.genres):
				return False
			if wanted_year is not None and movie.release_date.year != wanted_year:
				return False
			return True

		results = [movie for movie in movies if matches(movie)]
		logger.debug(
			f"[Filter] category={wanted_category} genre={wanted_genre} year={wanted_year} -> {len(results)} movies"
		)
		return results
