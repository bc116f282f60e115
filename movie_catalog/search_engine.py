"""
Search engine module.
Scores every movie against a text query and keeps only the best-matching ones.
"""

from typing import Iterable, List, Optional  # type annotations for clarity

# Import project modules for data structures and components
from .models import Movie, SearchResult  # core data classes
from .ranking import MatchScorer  # field-count relevance score

# Import loguru for console logging
from loguru import logger  # simple structured logger


class SearchEngine:
	"""
	Relevance search over a sequence of movies.
	Only the movies that reach the highest score are returned, not the full ranked list.
	"""
	def __init__(self, scorer: Optional[MatchScorer] = None):
		self.scorer = scorer or MatchScorer()  # scorer instance

	def search_scored(self, movies: Iterable[Movie], query: str) -> List[SearchResult]:
		"""Return the top-scoring movies paired with their score, in original relative order."""
		logger.debug(f"[Search] Query: '{query}'")  # trace

		# Score each movie exactly once so ranking and selection agree
		results: List[SearchResult] = []  # accumulator
		for movie in movies:
			score = self.scorer.score(movie, query)
			if score > 0:  # zero means no field matched
				results.append(SearchResult(movie=movie, score=score))

		if not results:
			logger.debug("[Search] No movie matched")
			return []

		# Stable sort keeps equal scores in catalog order
		results.sort(key=lambda r: r.score, reverse=True)
		best = results[0].score  # highest score after sorting
		top = [r for r in results if r.score == best]
		logger.debug(f"[Search] {len(results)} matches, returning {len(top)} with score {best}")  # summary
		return top

	def search(self, movies: Iterable[Movie], query: str) -> List[Movie]:
		"""Return only the movies whose score equals the maximum positive score."""
		return [r.movie for r in self.search_scored(movies, query)]
