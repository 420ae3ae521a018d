import logging

from fastapi import FastAPI
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from contract_hub.api.blueprints import router as blueprints_router
from contract_hub.api.contracts import router as contracts_router
from contract_hub.errors import register_error_handlers
from contract_hub.logging import configure_logging
from contract_hub.observability import ObservabilityMiddleware

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title="contract_hub API")
app.add_middleware(ObservabilityMiddleware)
register_error_handlers(app)

API_PREFIX = "/api/v1"

app.include_router(blueprints_router, prefix=API_PREFIX)
app.include_router(contracts_router, prefix=API_PREFIX)


@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.get("/metrics")
def metrics():
    data = generate_latest()
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)
