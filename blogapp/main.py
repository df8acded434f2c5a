from typing import Optional
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from .routes import router
from .core import CORS_ORIGINS, HOST, LOG_LEVEL, METRICS_ENABLED, PORT, SEED_SAMPLE_DATA, init_metrics
from .seed import seed_sample_data
from .storage import MemStorage, Storage
import logging
from pythonjsonlogger import jsonlogger

# setup structured logging
logger = logging.getLogger('blogapp')
if not logger.handlers:
    handler = logging.StreamHandler()
    formatter = jsonlogger.JsonFormatter('%(asctime)s %(levelname)s %(name)s %(message)s')
    handler.setFormatter(formatter)
    logger.addHandler(handler)
logger.setLevel(LOG_LEVEL)


def create_app(store: Optional[Storage] = None, metrics: bool = METRICS_ENABLED) -> FastAPI:
    """Build the API around a store; a seeded MemStorage is created when none is given."""
    if store is None:
        store = MemStorage()
        if SEED_SAMPLE_DATA:
            seed_sample_data(store)

    app = FastAPI(title="Blog API", version="1.0.0")
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    app.include_router(router, prefix="/api")

    @app.get('/healthz')
    async def healthz():
        return {'status': 'ok'}

    @app.middleware('http')
    async def log_requests(request: Request, call_next):
        logger.info({'msg': 'request_start', 'method': request.method, 'path': request.url.path})
        response = await call_next(request)
        logger.info({'msg': 'request_end', 'path': request.url.path, 'status': response.status_code})
        return response

    @app.on_event("startup")
    async def startup():
        # init_metrics logs and swallows exporter failures
        if metrics:
            init_metrics()

    return app


app = create_app()


def run():
    import uvicorn
    uvicorn.run('blogapp.main:app', host=HOST, port=PORT)
