"""
FastAPI server exposing the movie catalog.
Endpoints:
- GET /health: basic health check
- GET/POST /movies, GET/PUT/DELETE /movies/{id}: record CRUD
- GET /movies/filter?category=&genre=&releaseYear=: equality filters
- GET /movies/sort?dateOfRelease=&alphabetic=&asc=: reorders the catalog
- GET /movies/search?text=: best-matching movies only

Startup seeds the catalog from the JSONL file in settings.SEED_PATH if it exists.
"""

# Import standard libraries for timing and typing
import sys  # stderr sink for loguru
import time  # measure startup latency
from datetime import date  # release dates in payloads
from typing import List, Optional  # precise typing for clarity

# Import FastAPI for building the web API and Pydantic for request/response models
from fastapi import Depends, FastAPI, HTTPException, Query  # FastAPI primitives
from pydantic import BaseModel, ConfigDict, Field  # schema definitions

# Import our internal modules for data loading and the catalog facade
from movie_catalog import settings  # env-driven configuration
from movie_catalog.catalog_service import CatalogService  # core catalog operations
from movie_catalog.data_loader import DataLoader  # loads and normalizes seed movies
from movie_catalog.models import Movie  # record dataclass
from movie_catalog.movie_store import MovieStore  # canonical record sequence

# Import loguru for simple, structured console logging
from loguru import logger  # convenient console logger

# Instantiate the FastAPI application with metadata
app = FastAPI(title="Movie Catalog API", version="1.0.0")  # web app

# Globals that hold the catalog service and measured startup time
SERVICE: Optional[CatalogService] = None  # will point to the initialized service
STARTUP_TIME_S: float = 0.0  # measures how long startup took


# Pydantic model for the writable part of a movie (request bodies)
class MovieIn(BaseModel):
	model_config = ConfigDict(populate_by_name=True)  # accept both field names and camelCase aliases

	title: str = Field(..., min_length=1)  # display title
	description: str = ''  # synopsis
	category: str = ''  # single category
	genres: List[str] = []  # genre names
	release_date: date = Field(..., alias='releaseDate')  # ISO date
	director: str = ''  # director name
	actors: List[str] = []  # cast
	rating: float = 0.0  # average rating
	poster_url: str = Field('', alias='posterUrl')  # poster image reference

	def to_movie(self) -> Movie:
		"""Convert the payload into an unsaved Movie (id assigned by the store)."""
		return Movie(
			title=self.title,
			release_date=self.release_date,
			description=self.description,
			category=self.category,
			genres=list(self.genres),
			director=self.director,
			actors=list(self.actors),
			rating=self.rating,
			poster_url=self.poster_url,
		)


# Pydantic model for a stored movie (responses)
class MovieOut(MovieIn):
	id: int  # store-assigned identifier

	@classmethod
	def from_movie(cls, movie: Movie) -> 'MovieOut':
		return cls(
			id=movie.id,
			title=movie.title,
			description=movie.description,
			category=movie.category,
			genres=movie.genres,
			release_date=movie.release_date,
			director=movie.director,
			actors=movie.actors,
			rating=movie.rating,
			poster_url=movie.poster_url,
		)


# Pydantic model for a single search hit with its relevance
class SearchResponseItem(BaseModel):
	movie: MovieOut  # movie metadata
	score: int  # number of matching fields


# Pydantic model for the complete search response payload
class SearchResponse(BaseModel):
	query: str  # original query string
	results: List[SearchResponseItem]  # best-matching items


def get_service() -> CatalogService:
	"""Dependency returning the live catalog, or 503 while startup has not run."""
	if SERVICE is None:
		logger.warning("[API] Request received but catalog not initialized")  # guard log
		raise HTTPException(status_code=503, detail="Catalog not initialized")
	return SERVICE


def to_out(movies: List[Movie]) -> List[MovieOut]:
	return [MovieOut.from_movie(m) for m in movies]


# FastAPI startup hook to initialize the catalog once
@app.on_event("startup")
async def startup_event():
	"""Configure logging, seed the store and build the catalog service."""
	global SERVICE, STARTUP_TIME_S  # refer to module-level globals
	start = time.time()  # start timer for startup latency

	logger.remove()  # replace the default sink so the level is configurable
	logger.add(sys.stderr, level=settings.LOG_LEVEL)
	logger.info("[API] Startup: loading seed movies...")  # log intent

	movies: List[Movie] = []  # empty catalog when no seed file is present
	if settings.SEED_PATH.exists():
		movies = DataLoader().load_movies_from_jsonl(str(settings.SEED_PATH))  # read dataset
	else:
		logger.warning(f"[API] Seed file {settings.SEED_PATH} not found; starting with an empty catalog")

	SERVICE = CatalogService(MovieStore(movies))  # create service

	STARTUP_TIME_S = time.time() - start  # elapsed seconds
	logger.info(f"[API] Startup complete in {STARTUP_TIME_S:.2f}s with {len(movies)} movies.")  # summary


# Simple health endpoint for readiness checks
@app.get("/health")
async def health():
	"""Return minimal health info for liveness/readiness probes."""
	return {
		"status": "ok",  # constant indicator
		"catalog_ready": SERVICE is not None,  # True if service initialized
		"movies": len(SERVICE.store) if SERVICE is not None else 0,  # catalog size
		"startup_seconds": round(STARTUP_TIME_S, 2)  # startup latency
	}


@app.get("/movies", response_model=List[MovieOut])
def list_movies(service: CatalogService = Depends(get_service)):
	return to_out(service.list_movies())


@app.post("/movies", response_model=MovieOut, status_code=201)
def add_movie(payload: MovieIn, service: CatalogService = Depends(get_service)):
	movie = service.add_movie(payload.to_movie())
	return MovieOut.from_movie(movie)


# Query routes are declared before /movies/{movie_id} so their paths are not read as ids
@app.get("/movies/filter", response_model=List[MovieOut])
def filter_movies(
	category: Optional[str] = None,
	genre: Optional[str] = None,
	release_year: int = Query(0, alias="releaseYear"),  # 0 means unset
	service: CatalogService = Depends(get_service),
):
	return to_out(service.filter(category=category, genre=genre, release_year=release_year))


@app.get("/movies/sort", response_model=List[MovieOut])
def sort_movies(
	date_of_release: bool = Query(False, alias="dateOfRelease"),
	alphabetic: bool = False,
	asc: bool = True,
	service: CatalogService = Depends(get_service),
):
	"""Reorder the catalog; later list calls return the new order."""
	return to_out(service.sort(by_date=date_of_release, by_title=alphabetic, ascending=asc))


@app.get("/movies/search", response_model=SearchResponse)
def search_movies(text: str = Query(..., description="Free-text query"), service: CatalogService = Depends(get_service)):
	logger.debug(f"[API] /movies/search text='{text}'")  # debug log of input
	results = service.search_scored(text)
	logger.info(f"[API] /movies/search served {len(results)} results")  # summary
	items = [SearchResponseItem(movie=MovieOut.from_movie(r.movie), score=r.score) for r in results]
	return SearchResponse(query=text, results=items)


@app.get("/movies/{movie_id}", response_model=MovieOut)
def get_movie(movie_id: int, service: CatalogService = Depends(get_service)):
	movie = service.get_movie(movie_id)
	if movie is None:
		raise HTTPException(status_code=404, detail=f"Movie {movie_id} not found")
	return MovieOut.from_movie(movie)


@app.put("/movies/{movie_id}", response_model=MovieOut)
def update_movie(movie_id: int, payload: MovieIn, service: CatalogService = Depends(get_service)):
	movie = service.update_movie(movie_id, payload.to_movie())
	if movie is None:
		raise HTTPException(status_code=404, detail=f"Movie {movie_id} not found")
	return MovieOut.from_movie(movie)


@app.delete("/movies/{movie_id}", status_code=204)
def delete_movie(movie_id: int, service: CatalogService = Depends(get_service)):
	if service.delete_movie(movie_id) is None:
		raise HTTPException(status_code=404, detail=f"Movie {movie_id} not found")


if __name__ == '__main__':
	import uvicorn  # ASGI server

	uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)
