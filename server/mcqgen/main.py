import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from mcqgen import config
from mcqgen.api.mcq import router as mcq_router
from mcqgen.core.generator import MCQGenerator, build_generator

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if getattr(app.state, "generator", None) is None:
        app.state.generator = build_generator()
        logger.info(
            "Model client ready: provider=%s model=%s validation=%s output=%s",
            config.PROVIDER, config.MODEL_NAME, config.VALIDATION, config.OUTPUT_PATH,
        )
    yield


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail}, headers=exc.headers)


def create_app(generator: Optional[MCQGenerator] = None) -> FastAPI:
    """
    `generator` is injected by tests; otherwise one is built from config at startup.
    """
    app = FastAPI(title="MCQ Generator", lifespan=lifespan)
    app.state.generator = generator
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.include_router(mcq_router)

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app


app = create_app()


def run():
    import uvicorn

    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Server is running on http://localhost:%d", config.PORT)
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
