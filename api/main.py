import logging
from contextlib import asynccontextmanager

import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core import settings
from core.db import Database
from core.dependencies import get_db
from pegawai import errors
from pegawai import router as pegawai_router

# Must run before any settings are read.
load_dotenv()

logging.basicConfig(
    level=settings.log_level(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Initialize the DB pool once per process.
    app.state.db = await Database.connect()
    try:
        yield
    finally:
        await app.state.db.close()
        app.state.db = None


app = FastAPI(lifespan=lifespan)

# Allow the front-end page to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(pegawai_router.router, tags=["pegawai"])


@app.exception_handler(errors.RegistryError)
async def registry_error_handler(_: Request, exc: errors.RegistryError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.message},
    )


@app.get("/api/health")
async def health(request: Request) -> JSONResponse:
    try:
        ok = await get_db(request).ping()
    except Exception as exc:
        logger.exception("health_check_failed")
        return JSONResponse(status_code=500, content={"ok": False, "error": str(exc)})
    return JSONResponse(content={"ok": ok})


if __name__ == "__main__":
    uvicorn.run(app, host=settings.http_host(), port=settings.http_port())
