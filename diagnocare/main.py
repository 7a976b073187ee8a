import logging

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from diagnocare.core import config
from diagnocare.database import engine, init_schema
from diagnocare.routes import (
    auth_routes,
    banner_routes,
    booking_routes,
    diagnostic_test_routes,
    payment_routes,
    user_routes,
)

app = FastAPI(title='DiagnoCare API')

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

logger = logging.getLogger(__name__)


@app.on_event('startup')
def initialize_database() -> None:
    config.validate_runtime_config()
    try:
        init_schema()
    except SQLAlchemyError:
        logger.exception('Database initialization failed. Check DATABASE_URL and database credentials.')
    else:
        logger.info('DiagnoCare database ready')


@app.on_event('shutdown')
def close_database() -> None:
    engine.dispose()


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    logger.warning('Rejected document for %s %s: %s', request.method, request.url.path, exc.orig)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={'detail': 'Document violates a storage constraint.'},
    )


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.exception('Database error while handling %s %s', request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={'detail': 'Database unavailable. Verify DATABASE_URL and database credentials.'},
    )


@app.get('/', response_class=PlainTextResponse)
def root():
    return 'DiagnoCare Server is running'


app.include_router(auth_routes.router)
app.include_router(user_routes.router)
app.include_router(banner_routes.router)
app.include_router(diagnostic_test_routes.router)
app.include_router(booking_routes.router)
app.include_router(payment_routes.router)


def run() -> None:
    uvicorn.run(app, host='0.0.0.0', port=config.PORT)


if __name__ == '__main__':
    run()
