"""
Data models for the Movie Catalog.
Defines the core data structures shared by the store, the query engines and the API.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass, field  # auto-generates __init__, __repr__, __eq__
# Import date for the calendar release date of a movie
from datetime import date  # year/month/day value
# Import typing helpers for precise and self-documenting types
from typing import List  # lists of genres and actors


# Fields replaced by an update; everything except the identifier
MUTABLE_FIELDS = (
	'title',
	'description',
	'genres',
	'category',
	'release_date',
	'director',
	'actors',
	'rating',
	'poster_url',
)


@dataclass
class Movie:
	"""
	Represents a single catalog entry and everything we know about it.
	The identifier is owned by the store: it is assigned on add and never changed by update.
	"""
	title: str  # display title (non-empty)
	release_date: date  # calendar release date, used for year filtering and date sorting
	description: str = ''  # short synopsis
	category: str = ''  # single-valued category (e.g., "Film", "Series")
	genres: List[str] = field(default_factory=list)  # genre names, compared case-insensitively
	director: str = ''  # director's name
	actors: List[str] = field(default_factory=list)  # cast in billing order
	rating: float = 0.0  # average rating
	poster_url: str = ''  # poster image reference
	id: int = -1  # assigned by MovieStore; -1 until stored

	@property
	def release_year(self) -> int:
		"""Calendar year component of the release date."""
		return self.release_date.year

	def text_fields(self) -> List[str]:
		"""
		Return every text attribute that takes part in relevance scoring.
		Single-valued fields come first, then one entry per genre and per actor.
		"""
		fields = [self.title, self.description, self.category, self.director]  # scalar text fields
		fields.extend(self.genres)  # each genre entry counts on its own
		fields.extend(self.actors)  # each actor entry counts on its own
		return fields


@dataclass
class SearchResult:
	movie: Movie  # matched movie
	score: int  # number of matching fields
