"""
Unit tests for SortEngine: keys, direction, precedence and stability.
Run: pytest tests/test_sorting.py
"""

import sys
from datetime import date
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
	sys.path.insert(0, str(ROOT))

from movie_catalog.models import Movie
from movie_catalog.sorting import SortEngine


def load_movies():
	return [
		Movie(id=0, title="beta", release_date=date(2005, 1, 1)),
		Movie(id=1, title="Alpha", release_date=date(1999, 1, 1)),
		Movie(id=2, title="Charlie", release_date=date(2005, 1, 1)),
		Movie(id=3, title="alpha", release_date=date(2010, 1, 1)),
	]


def ids(movies):
	return [m.id for m in movies]


def test_sort_by_date_ascending_is_stable():
	assert ids(SortEngine().sort(load_movies(), by_date=True)) == [1, 0, 2, 3]


def test_sort_by_date_descending_is_stable():
	assert ids(SortEngine().sort(load_movies(), by_date=True, ascending=False)) == [3, 0, 2, 1]


def test_sort_by_title_ignores_case():
	assert ids(SortEngine().sort(load_movies(), by_title=True)) == [1, 3, 0, 2]
	assert ids(SortEngine().sort(load_movies(), by_title=True, ascending=False)) == [2, 0, 1, 3]


def test_date_takes_precedence_over_title():
	engine = SortEngine()
	both = engine.sort(load_movies(), by_date=True, by_title=True, ascending=False)
	date_only = engine.sort(load_movies(), by_date=True, ascending=False)
	assert ids(both) == ids(date_only)


def test_no_key_leaves_order_unchanged():
	assert ids(SortEngine().sort(load_movies())) == [0, 1, 2, 3]


def test_sort_mutates_and_returns_same_list():
	movies = load_movies()
	result = SortEngine().sort(movies, by_title=True)
	assert result is movies
	assert ids(movies) == [1, 3, 0, 2]


def test_sorted_view_leaves_input_untouched():
	movies = load_movies()
	view = SortEngine().sorted_view(movies, by_date=True)
	assert ids(view) == [1, 0, 2, 3]
	assert ids(movies) == [0, 1, 2, 3]
