from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI

from wordscramble import __version__
from wordscramble.api.routes import router
from wordscramble.assets.startup import init_assets_for_app
from wordscramble.settings import get_settings

# Configure logging
logging.basicConfig(level=get_settings().log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    init_assets_for_app()
    logger.info("wordscramble %s ready", __version__)
    yield


app = FastAPI(title="wordscramble", version=__version__, lifespan=lifespan)
app.include_router(router)


@app.get("/info")
async def info() -> dict[str, str]:
    return {"name": "wordscramble", "version": __version__}
