"""
Ranking module.
Scores how well a movie matches a free-text query.
"""

from .models import Movie


class MatchScorer:
	"""
	Counts the distinct text attributes of a movie that contain the query:
	- title, description, category, director: one point each
	- genres and actors: one point per matching entry
	Matching is a case-insensitive substring test on the query exactly as given,
	surrounding whitespace included; repeated occurrences inside one attribute
	still count once. A blank query matches nothing.
	"""

	def score(self, movie: Movie, query: str) -> int:
		if not query or not query.strip():
			return 0
		needle = query.lower()
		return sum(1 for value in movie.text_fields() if needle in (value or '').lower())
