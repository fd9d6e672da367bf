import asyncio
import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from wordgrid.settings import settings
from wordgrid.trie import Trie, load_trie

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("wordgrid")

# Populated at startup
_trie: Trie | None = None

RELOAD_FIELDS = ("DICTIONARY_PATH", "MIN_WORD_LENGTH")


class SolveRequest(BaseModel):
    grid: list[list[str] | str]


def _load_dictionary() -> Trie:
    path = settings.DICTIONARY_PATH
    logger.info("Loading dictionary from %s (min_length=%d)", path, settings.MIN_WORD_LENGTH)
    try:
        return load_trie(str(path), settings.MIN_WORD_LENGTH)
    except FileNotFoundError:
        logger.warning("Dictionary %s not found, starting with an empty word list", path)
        return Trie()


def _apply_log_level():
    logger.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)


def create_app() -> FastAPI:
    from contextlib import asynccontextmanager

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        global _trie
        _apply_log_level()
        _trie = _load_dictionary()
        logger.info("Trie loaded (%d words)", len(_trie))
        yield

    application = FastAPI(title="Word Grid Solver", lifespan=lifespan)

    @application.get("/health")
    async def health():
        return {
            "status": "ok",
            "trie_loaded": _trie is not None,
            "dictionary_words": len(_trie) if _trie is not None else 0,
        }

    @application.post("/solve")
    async def solve(body: SolveRequest):
        from wordgrid.grid import InvalidGrid, grid_shape
        from wordgrid.metrics import StageTimer
        from wordgrid.solver import solve as solve_grid

        if _trie is None:
            raise HTTPException(503, "Dictionary not loaded")

        grid = body.grid
        rows, cols = grid_shape(grid)
        logger.info("POST /solve grid=%dx%d", rows, cols)
        if rows * cols > settings.MAX_GRID_CELLS:
            raise HTTPException(413, f"Grid too large (max {settings.MAX_GRID_CELLS} cells)")

        timer = StageTimer("request")
        try:
            with timer.stage("solve"):
                result = await asyncio.wait_for(
                    run_in_threadpool(
                        solve_grid, grid, _trie,
                        settings.MIN_WORD_LENGTH, settings.MAX_PATHS_PER_WORD,
                    ),
                    timeout=settings.SOLVE_TIMEOUT,
                )
        except InvalidGrid as e:
            raise HTTPException(400, f"Invalid grid: {e}")
        except asyncio.TimeoutError:
            logger.warning("Solve exceeded %.1fs deadline", settings.SOLVE_TIMEOUT)
            raise HTTPException(504, f"Solve exceeded {settings.SOLVE_TIMEOUT}s")

        timer.stop()
        logger.info("Found %d words in %.1fms", result.total_words, result.solve_time)
        return JSONResponse({**result.to_dict(), "stage_timings": timer.summary()})

    @application.get("/api/settings")
    async def api_get_settings():
        from wordgrid.settings import get_editable_settings, EDITABLE_FIELDS
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        global _trie
        from wordgrid.settings import update_settings, get_editable_settings
        body = await request.json()
        errors = update_settings(settings, **body)
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.info("Settings updated: %s", body)
        if "DEBUG" in body:
            _apply_log_level()
        if any(name in body for name in RELOAD_FIELDS):
            _trie = await run_in_threadpool(_load_dictionary)
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


app = create_app()


def main():
    import uvicorn
    uvicorn.run("wordgrid.server:app", host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    main()
