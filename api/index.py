from functools import lru_cache
import logging
from pathlib import Path
import sys

from fastapi import FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel

# Ensure local src package is importable in serverless runtime.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from ingredient_lens.config import ServiceConfig  # noqa: E402
from ingredient_lens.core import IngredientService  # noqa: E402
from ingredient_lens.exceptions import EmptyQueryError  # noqa: E402

CONFIG = ServiceConfig.from_env()
EMPTY_QUERY_MESSAGE = "검색어를 입력해주세요."

app = FastAPI(title="ingredient-lens API", version="1.0.0")
logger = logging.getLogger(__name__)
logger.info(
    "config: usda_key_set=%s usda_timeout_sec=%s dictionary=%s origins=%s",
    CONFIG.usda_api_key != "DEMO_KEY",
    CONFIG.usda_timeout_sec,
    CONFIG.dictionary_version,
    ",".join(CONFIG.allowed_origins),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(CONFIG.allowed_origins),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


class ErrorResponse(BaseModel):
    error: str


@lru_cache(maxsize=1)
def get_service() -> IngredientService:
    return IngredientService(config=CONFIG)


@app.get("/health")
def health() -> dict[str, bool]:
    return {"ok": True}


@app.get(
    "/api/v1/ingredients/search",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def search_ingredients(query: str | None = Query(default=None)) -> JSONResponse:
    query = (query or "").strip()
    if not query:
        return JSONResponse(status_code=400, content={"error": EMPTY_QUERY_MESSAGE})

    try:
        outcome = get_service().fetch_all(query)
    except EmptyQueryError as exc:
        return JSONResponse(status_code=400, content={"error": str(exc)})
    except Exception:
        logger.exception("ingredient search failed")
        return JSONResponse(status_code=500, content={"error": "internal_error"})

    return JSONResponse(status_code=200, content=outcome.to_payload())
