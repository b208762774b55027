from __future__ import annotations

import logging
import math
from contextlib import asynccontextmanager
from typing import Any

from devkit.observability import configure_logging, configure_otel, configure_probe_access_log_filter
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from geo_engine import GeoPoint, rank_by_distance

from school_service.errors import ApiError, SchoolAlreadyExistsError, SchoolStoreError
from school_service.middleware import ObservabilityMiddleware
from school_service.observability import PrometheusRequestMetricsCollector, get_trace_id
from school_service.schemas import SchoolWithDistance
from school_service.settings import SchoolServiceSettings, load_school_settings
from school_service.store import School, SchoolStore
from school_service.validation import validate_input

logger = logging.getLogger(__name__)

REGISTERED_MESSAGE = "School registered successfully"
ALREADY_EXISTS_MESSAGE = "School already exists."
DATABASE_ERROR_MESSAGE = "Database error"
EMPTY_DATABASE_MESSAGE = "The database is empty"
INVALID_BODY_MESSAGE = "Request body must be a JSON object."
INVALID_REFERENCE_MESSAGE = "Latitude and longitude must be valid numbers."


def success_response(data: object, meta: dict[str, object] | None = None) -> dict[str, object]:
    return {"success": True, "data": data, "meta": meta or {}}


def _database_error() -> ApiError:
    return ApiError(code="DATABASE_ERROR", message=DATABASE_ERROR_MESSAGE, status_code=500)


def _already_exists_error() -> ApiError:
    return ApiError(code="SCHOOL_EXISTS", message=ALREADY_EXISTS_MESSAGE, status_code=400)


async def _read_json_object(request: Request) -> dict[str, Any]:
    # a missing body reads as {} so field validation reports the first missing field
    if not (await request.body()).strip():
        return {}
    try:
        payload = await request.json()
    except ValueError as exc:
        raise ApiError(code="INVALID_BODY", message=INVALID_BODY_MESSAGE, status_code=400) from exc
    if not isinstance(payload, dict):
        raise ApiError(code="INVALID_BODY", message=INVALID_BODY_MESSAGE, status_code=400)
    return payload


def _reference_point(settings: SchoolServiceSettings) -> GeoPoint:
    lat = settings.SCHOOL_REFERENCE_LATITUDE
    lng = settings.SCHOOL_REFERENCE_LONGITUDE
    if not (math.isfinite(lat) and math.isfinite(lng)):
        raise ApiError(code="INVALID_REFERENCE", message=INVALID_REFERENCE_MESSAGE, status_code=400)
    return GeoPoint(lat=lat, lng=lng)


def create_app(
    settings: SchoolServiceSettings | None = None,
    store: SchoolStore | None = None,
) -> FastAPI:
    settings = settings or load_school_settings()
    store = store or SchoolStore(settings.DATABASE_URL)

    configure_logging("school_service")
    configure_otel(service_name=settings.SERVICE_NAME)
    configure_probe_access_log_filter()

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        try:
            await store.ensure_ready()
        except Exception:
            logger.exception("school_store_init_failed", extra={"component": "school_service"})
            raise
        try:
            yield
        finally:
            await store.close()

    app = FastAPI(title="School Service", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.school_store = store
    app.state.prom_metrics = PrometheusRequestMetricsCollector()
    app.add_middleware(ObservabilityMiddleware, collector=app.state.prom_metrics)

    @app.exception_handler(ApiError)
    async def handle_api_error(_: Request, exc: ApiError) -> PlainTextResponse:
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.get("/healthz")
    async def healthz() -> dict:
        return success_response({"status": "ok"}, meta={})

    @app.get("/readyz")
    async def readyz() -> dict:
        return success_response({"status": "ready"}, meta={})

    @app.get("/metrics")
    async def metrics() -> Response:
        return Response(content=app.state.prom_metrics.render(), media_type="text/plain; version=0.0.4")

    @app.post("/register")
    async def register_school(request: Request) -> PlainTextResponse:
        payload = await _read_json_object(request)
        name = payload.get("name")
        address = payload.get("address")
        latitude = payload.get("latitude")
        longitude = payload.get("longitude")

        error = validate_input(name, address, latitude, longitude)
        if error:
            raise ApiError(code="VALIDATION_ERROR", message=error, status_code=400)

        try:
            if await store.find_by_identity(name, address) is not None:
                raise SchoolAlreadyExistsError("school already exists")
            school = await store.insert(name, address, latitude, longitude)
        except SchoolAlreadyExistsError as exc:
            logger.info(
                "school_duplicate_rejected",
                extra={"component": "school_service", "trace_id": get_trace_id()},
            )
            raise _already_exists_error() from exc
        except SchoolStoreError as exc:
            raise _database_error() from exc

        logger.info(
            "school_registered",
            extra={"component": "school_service", "school_id": school.id, "trace_id": get_trace_id()},
        )
        return PlainTextResponse(REGISTERED_MESSAGE, status_code=200)

    @app.get("/listSchools")
    async def list_schools() -> Response:
        origin = _reference_point(settings)
        try:
            schools = await store.list_all()
        except SchoolStoreError as exc:
            raise _database_error() from exc

        if not schools:
            return PlainTextResponse(EMPTY_DATABASE_MESSAGE, status_code=200)

        ranked = rank_by_distance(
            origin,
            schools,
            locate=lambda school: GeoPoint(lat=school.latitude, lng=school.longitude),
        )
        return JSONResponse(
            content=[_to_listing_item(school, distance).model_dump() for school, distance in ranked],
        )

    return app


def _to_listing_item(school: School, distance: float) -> SchoolWithDistance:
    return SchoolWithDistance(
        id=school.id,
        name=school.name,
        address=school.address,
        latitude=school.latitude,
        longitude=school.longitude,
        distance=distance,
    )
