"""
FastAPI application for Mini Unit Graph service.
"""
import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from unit_graph.config import Config
from unit_graph.converter import UnitConverter
from unit_graph.errors import (
    AmbiguousProperty,
    InvalidRecord,
    InvalidValue,
    PropertyNotFound,
    UnitGraphError,
    UnitNotFound,
    UnitsNotRelated,
)
from unit_graph.logging_utils import configure_logging, log_exception
from unit_graph.schema import (
    ConversionResult,
    ConvertRequest,
    ErrorResponse,
    GraphResponse,
    MultiplierRequest,
    MultiplierResult,
    OptimizeResponse,
    PropertiesResponse,
    UnitsResponse,
)

logger = logging.getLogger(__name__)

app = FastAPI(title="Mini Unit Graph", version="0.1.0")

# Global state
config: Optional[Config] = None
converter: Optional[UnitConverter] = None

_STATUS_CODES = (
    (UnitNotFound, 404),
    (PropertyNotFound, 404),
    (AmbiguousProperty, 409),
    (UnitsNotRelated, 400),
    (InvalidValue, 400),
    (InvalidRecord, 400),
)


@app.on_event("startup")
async def startup_event():
    """Initialize global state on startup."""
    global config, converter

    config = Config.default()
    configure_logging(config.log_level)
    converter = UnitConverter.from_config(config)


@app.exception_handler(UnitGraphError)
async def unit_graph_error_handler(request: Request, exc: UnitGraphError):
    """Translate engine errors into JSON error responses."""
    status_code = 500
    for error_type, code in _STATUS_CODES:
        if isinstance(exc, error_type):
            status_code = code
            break
    if status_code >= 500:
        log_exception(logger, exc, show_traceback=True)
    body = ErrorResponse(
        error=type(exc).__name__,
        detail=exc.user_message,
        candidates=getattr(exc, "candidates", []),
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


def _get_converter() -> UnitConverter:
    if converter is None:
        raise HTTPException(status_code=500, detail="Converter not initialized")
    return converter


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "mini-unit-graph"}


@app.get("/properties", response_model=PropertiesResponse)
async def list_properties():
    """List the registered properties."""
    return PropertiesResponse(properties=_get_converter().get_properties())


@app.get("/units", response_model=UnitsResponse)
async def list_units(property: Optional[str] = None):
    """
    List units, optionally for one property.

    Args:
        property: Property to filter on

    Returns:
        UnitsResponse with name, full name and property of each unit
    """
    return UnitsResponse(units=_get_converter().get_units(property))


@app.get("/graphs/{property}", response_model=GraphResponse)
async def get_graph(property: str):
    """Units and weighted edges of one property, with formatted edge labels."""
    current = _get_converter()
    graph = current.get_graph(property)
    edges = graph.edges()
    labels = graph.edge_labels(current.config.edge_label_format)
    return GraphResponse(
        property=property,
        units=graph.units(),
        edges=edges,
        edge_labels=[labels[(edge.source, edge.target)] for edge in edges],
        stats=graph.get_stats(),
    )


@app.post("/convert", response_model=ConversionResult)
async def convert_value(request: ConvertRequest):
    """
    Convert a value between two units.

    Args:
        request: Value, units and optional property

    Returns:
        ConversionResult with the value, multiplier, property and path
    """
    return _get_converter().convert(
        request.value, request.unit_from, request.unit_to, request.property
    )


@app.post("/multiplier", response_model=MultiplierResult)
async def get_multiplier(request: MultiplierRequest):
    """Multiplier between two units."""
    return _get_converter().get_multiplier(
        request.unit_from, request.unit_to, request.property
    )


@app.post("/optimize", response_model=OptimizeResponse)
async def optimize_graphs():
    """Precompute direct edges in every property graph."""
    edges_added = _get_converter().optimize_with_stats()
    return OptimizeResponse(status="success", edges_added=edges_added)
