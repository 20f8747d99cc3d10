import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from rentdesk.config import APP_HOST, APP_PORT, DEBUG
from rentdesk.database.init import Base, engine
from rentdesk.database import models  # noqa: F401  registers the tables
from rentdesk.routes import (
    auth_routes,
    customer_routes,
    rental_routes,
    tablecloth_color_routes,
    inventory_routes,
    report_routes,
)
from rentdesk.responses.error import validation_error, not_found_error, internal_server_error
from rentdesk.utils.exceptions import ValidationError, NotFoundError, DataAccessError
from rentdesk.utils.logger import setup_logging

setup_logging()
logger = logging.getLogger(__name__)

Base.metadata.create_all(bind=engine)

app = FastAPI(title="Rentdesk API", debug=DEBUG)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ValidationError)
async def handle_validation_error(request: Request, exc: ValidationError):
    return validation_error(exc.field, exc.message)


@app.exception_handler(NotFoundError)
async def handle_not_found(request: Request, exc: NotFoundError):
    return not_found_error(exc.message)


@app.exception_handler(DataAccessError)
async def handle_data_access_error(request: Request, exc: DataAccessError):
    logger.error("Data access error on %s %s: %s", request.method, request.url.path, exc.message)
    return internal_server_error(exc.message)


app.include_router(auth_routes.router)
app.include_router(customer_routes.router)
app.include_router(rental_routes.router)
app.include_router(tablecloth_color_routes.router)
app.include_router(inventory_routes.router)
app.include_router(report_routes.router)


@app.get("/")
def read_root():
    return {"name": "Rentdesk API", "version": "1.0.0"}


if __name__ == "__main__":
    uvicorn.run("rentdesk.main:app", host=APP_HOST, port=APP_PORT, reload=True)
