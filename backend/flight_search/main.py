import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from flight_search.config import settings
from flight_search.api.v1.router import api_router
from flight_search.services.page_controller import FlightSearchPage

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: un errore di caricamento non blocca l'app,
    # la pagina resta in stato "error" finché non si fa reload
    page = FlightSearchPage(settings)
    app.state.page = page
    await page.load()

    yield


app = FastAPI(
    title="AMS Flight Search API",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


app.include_router(api_router)


@app.get("/api/v1/health")
async def health():
    return {"status": "ok", "env": settings.app_env}
