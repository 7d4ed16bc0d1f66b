"""
HTTP layer over the pool.

Parses and validates requests, calls one pool operation per request and maps
its outcome to a status code. No allocation logic lives here.
"""
import logging
import re
from typing import List, Optional

from fastapi import FastAPI, Form, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import TypeAdapter, ValidationError
from starlette.concurrency import run_in_threadpool

from carpool.api.schemas import CarSchema, JourneySchema, LocatedCarSchema
from carpool.config.config import ServiceConfig
from carpool.errors.errors import InvalidInput, NotFound
from carpool.pool.pool import Pool

logger = logging.getLogger(__name__)

cars_adapter = TypeAdapter(List[CarSchema])


def parse_group_id(raw: Optional[str]) -> int:
    if raw is None or raw == '':
        raise InvalidInput('ID', 'is required')
    # plain optional sign and digits, no spaces or underscores
    if not re.fullmatch(r'[+-]?[0-9]+', raw):
        raise InvalidInput('ID', f'must be an integer, got {raw!r}')
    return int(raw)


def build_app(pool: Pool = None, config: ServiceConfig = None) -> FastAPI:
    app = FastAPI(
        title='Car Pooling',
        description='Seats groups of people in cars with free seats',
        version='1.0.0'
    )
    app.state.pool = pool if pool is not None else Pool()
    app.state.config = config if config is not None else ServiceConfig()

    @app.exception_handler(InvalidInput)
    async def invalid_input_handler(request: Request, exc: InvalidInput):
        logger.warning('%s %s rejected: %s', request.method, request.url.path, exc)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={'detail': str(exc)})

    @app.exception_handler(NotFound)
    async def not_found_handler(request: Request, exc: NotFound):
        logger.warning('%s %s: %s', request.method, request.url.path, exc)
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={'detail': str(exc)})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.warning('%s %s malformed: %s', request.method, request.url.path, exc.errors())
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={'detail': 'malformed request'})

    @app.get('/status')
    def get_status():
        return Response(status_code=status.HTTP_200_OK)

    @app.put('/cars')
    async def load_cars(request: Request):
        pool = request.app.state.pool
        try:
            payload = await request.json()
            cars = cars_adapter.validate_python(payload)
        except (ValueError, ValidationError) as e:
            # the previous cars and journeys are dropped even when the new list is unusable
            await run_in_threadpool(pool.load_fleet, [])
            raise InvalidInput('cars', f'payload can not be read: {e}')

        await run_in_threadpool(pool.load_fleet, [car.model_dump() for car in cars])
        return Response(status_code=status.HTTP_200_OK)

    @app.post('/journey', status_code=status.HTTP_202_ACCEPTED)
    async def request_journey(request: Request, journey: JourneySchema):
        pool = request.app.state.pool
        await run_in_threadpool(pool.request_ride, journey.model_dump())
        return Response(status_code=status.HTTP_202_ACCEPTED)

    @app.post('/dropoff')
    async def drop_off(request: Request, ID: Optional[str] = Form(default=None)):
        group_id = parse_group_id(ID)
        await run_in_threadpool(request.app.state.pool.drop_off, group_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    @app.post('/locate')
    async def locate(request: Request, ID: Optional[str] = Form(default=None)):
        group_id = parse_group_id(ID)
        vehicle = await run_in_threadpool(request.app.state.pool.locate, group_id)
        if vehicle is None:
            return Response(status_code=status.HTTP_204_NO_CONTENT)
        located = LocatedCarSchema(id=vehicle.id, seats=vehicle.seats)
        return JSONResponse(status_code=status.HTTP_200_OK, content=located.model_dump())

    return app
