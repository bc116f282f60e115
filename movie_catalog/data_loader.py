"""
Data loading and preprocessing module.
Handles loading seed movies from JSONL and cleaning/normalizing the raw fields.
"""

# Standard libs for JSON parsing, dates, typing, and paths
import json  # read JSON lines
from datetime import date  # release dates
from typing import List, Dict  # type hints
from pathlib import Path  # filesystem-safe paths

# Import our Movie data class used across the project
from .models import Movie  # structured movie record

# Console logging
from loguru import logger  # console logger


class DataLoader:
	"""
	Handles loading and preprocessing of seed movie data.
	Raw records may use camelCase (as exported by the REST API) or snake_case keys.
	"""

	# Alternate spellings accepted for each Movie field
	FIELD_ALIASES = {
		'release_date': ('release_date', 'releaseDate'),
		'poster_url': ('poster_url', 'posterUrl', 'url'),
		'description': ('description', 'overview'),
	}

	def load_movies_from_jsonl(self, filepath: str) -> List[Movie]:
		"""
		Load movies from a JSON Lines (JSONL) file where each line is one JSON object.
		Returns a list of Movie objects in file order; ids present in the file are kept.
		"""
		movies = []  # accumulator for parsed Movie objects
		filepath = Path(filepath)  # normalize path

		# Validate the file presence early to give clear error messages
		if not filepath.exists():
			raise FileNotFoundError(f"Movie data file not found: {filepath}")

		logger.info(f"[DataLoader] Loading movies from {filepath}...")  # log action

		# Open the file and read line-by-line
		with open(filepath, 'r', encoding='utf-8') as f:
			for line_num, line in enumerate(f, 1):  # keep track of line number for diagnostics
				if not line.strip():  # blank separator lines are allowed
					continue
				try:
					data = json.loads(line.strip())  # parse JSON object per line
					movie = self.parse_movie_data(data)  # convert dict -> Movie
					movies.append(movie)  # collect
				except json.JSONDecodeError as e:
					logger.warning(f"[DataLoader] Skipping invalid JSON at line {line_num}: {e}")  # malformed line
					continue  # move on
				except (KeyError, TypeError, ValueError) as e:
					logger.warning(f"[DataLoader] Error parsing movie at line {line_num}: {e}")  # bad field values
					continue  # move on

		logger.info(f"[DataLoader] Successfully loaded {len(movies)} movies.")  # summary
		return movies  # return list

	def parse_movie_data(self, data: Dict) -> Movie:
		"""
		Convert a raw dictionary (from file) into a strongly-typed Movie object.
		Raises ValueError when the title is missing or the release date is not ISO formatted.
		"""
		title = self._normalize_text(data.get('title'))  # clean title
		if not title:
			raise ValueError("Movie title cannot be empty")

		# Parse list fields that may arrive as comma-separated strings or lists
		genres = self._parse_comma_separated(data.get('genres', []))
		actors = self._parse_comma_separated(data.get('actors', []))

		movie = Movie(
			title=title,
			release_date=self._parse_date(self._first(data, 'release_date')),
			description=self._normalize_text(self._first(data, 'description')),
			category=self._normalize_text(data.get('category')),
			genres=genres,
			director=self._normalize_text(data.get('director')),
			actors=actors,
			rating=float(data.get('rating') or 0.0),  # float rating, 0 when missing
			poster_url=self._normalize_text(self._first(data, 'poster_url')),
		)
		if data.get('id') is not None:  # keep ids from exported catalogs
			movie.id = int(data['id'])
		return movie

	def _first(self, data: Dict, field_name: str):
		"""Return the value of the first alias of field_name present in data."""
		for key in self.FIELD_ALIASES[field_name]:
			if data.get(key) is not None:
				return data[key]
		return None

	def _parse_date(self, value) -> date:
		"""Accept a date, an ISO 'YYYY-MM-DD' string, or a bare year."""
		if isinstance(value, date):
			return value
		if isinstance(value, bool):  # bool is an int subclass, never a year
			raise ValueError(f"Invalid release date: {value!r}")
		if isinstance(value, int):  # bare year -> January 1st
			return date(value, 1, 1)
		if isinstance(value, str) and value.strip():
			return date.fromisoformat(value.strip()[:10])  # tolerate trailing time component
		raise ValueError(f"Invalid release date: {value!r}")

	def _parse_comma_separated(self, value) -> List[str]:
		"""
		Normalize a value that may be None, a list, or a comma-separated string
		into a list of clean strings.
		"""
		if value is None:  # missing field
			return []  # treat as empty list
		if isinstance(value, list):  # already a list
			return [str(item).strip() for item in value if item and str(item).strip()]  # clean each, drop blanks
		if isinstance(value, str):  # comma-separated string
			return [item.strip() for item in value.split(',') if item.strip()]  # split/trim
		return []  # any other type becomes empty

	def _normalize_text(self, text) -> str:
		"""
		Trim whitespace; handle None safely by returning empty string.
		Case is preserved because comparisons lowercase on their own.
		"""
		if not text:  # None or empty
			return ''  # normalize to empty
		return str(text).strip()

	def get_all_genres(self, movies: List[Movie]) -> List[str]:
		"""Return a sorted list of all unique genres in the dataset (case-insensitive)."""
		genres = {}  # lowercase -> first spelling seen
		for movie in movies:  # iterate
			for genre in movie.genres:
				genres.setdefault(genre.lower(), genre)
		return sorted(genres.values(), key=str.lower)  # sorted output

	def get_all_categories(self, movies: List[Movie]) -> List[str]:
		"""Return a sorted list of all unique categories in the dataset (case-insensitive)."""
		categories = {}  # lowercase -> first spelling seen
		for movie in movies:  # iterate
			if movie.category:  # ignore empty
				categories.setdefault(movie.category.lower(), movie.category)
		return sorted(categories.values(), key=str.lower)  # sorted output
