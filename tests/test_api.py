"""
HTTP tests for the FastAPI layer using TestClient.
Run: pytest tests/test_api.py
"""

import sys
from datetime import date
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
	sys.path.insert(0, str(ROOT))

import api
from movie_catalog.catalog_service import CatalogService
from movie_catalog.models import Movie
from movie_catalog.movie_store import MovieStore


@pytest.fixture
def client(monkeypatch):
	store = MovieStore([
		Movie(title="Alpha", genres=["Drama"], category="Film", release_date=date(2001, 1, 1)),
		Movie(title="beta", genres=["Comedy"], category="Film", release_date=date(1999, 1, 1)),
	])
	monkeypatch.setattr(api, "SERVICE", CatalogService(store))
	return TestClient(api.app)


def test_health(client):
	body = client.get("/health").json()
	assert body["catalog_ready"] is True
	assert body["movies"] == 2


def test_list_and_get(client):
	movies = client.get("/movies").json()
	assert [m["title"] for m in movies] == ["Alpha", "beta"]
	assert movies[0]["releaseDate"] == "2001-01-01"
	assert client.get("/movies/1").json()["title"] == "beta"
	assert client.get("/movies/9").status_code == 404


def test_add_update_delete(client):
	payload = {"title": "Gamma", "releaseDate": "2010-05-06", "genres": ["Action"], "category": "Film"}
	created = client.post("/movies", json=payload)
	assert created.status_code == 201
	movie_id = created.json()["id"]
	assert movie_id == 2

	updated = client.put(f"/movies/{movie_id}", json={"title": "Delta", "releaseDate": "2011-01-01"})
	assert updated.json()["title"] == "Delta"
	assert updated.json()["id"] == movie_id

	assert client.delete(f"/movies/{movie_id}").status_code == 204
	assert client.get(f"/movies/{movie_id}").status_code == 404
	assert client.delete(f"/movies/{movie_id}").status_code == 404


def test_invalid_body_is_rejected(client):
	assert client.post("/movies", json={"title": "", "releaseDate": "2010-01-01"}).status_code == 422
	assert client.post("/movies", json={"title": "X"}).status_code == 422


def test_filter_sort_search(client):
	assert [m["id"] for m in client.get("/movies/filter", params={"genre": "comedy"}).json()] == [1]
	assert [m["id"] for m in client.get("/movies/filter", params={"releaseYear": 0}).json()] == [0, 1]

	sorted_movies = client.get("/movies/sort", params={"dateOfRelease": "true", "asc": "true"}).json()
	assert [m["id"] for m in sorted_movies] == [1, 0]
	assert [m["id"] for m in client.get("/movies").json()] == [1, 0]

	found = client.get("/movies/search", params={"text": "drama"}).json()
	assert [(r["movie"]["id"], r["score"]) for r in found["results"]] == [(0, 1)]


def test_uninitialized_catalog_returns_503(monkeypatch):
	monkeypatch.setattr(api, "SERVICE", None)
	assert TestClient(api.app).get("/movies").status_code == 503
