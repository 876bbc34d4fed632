# main.py

import uuid
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from green_pizza import __version__
from green_pizza.config import Settings, get_settings
from green_pizza.errors import BadRequest, OrderServiceError
from green_pizza.logger import configure_logging, log_debug, log_error, log_info, log_warning
from green_pizza.menu import DEFAULT_MENU, Menu, MenuItem
from green_pizza.orders import find_pizza, place_order, utc_timestamp
from green_pizza.schemas import ErrorResponse, HealthResponse, OrderConfirmation, OrderRequest


# Log startup and shutdown; the menu itself is fixed before the app is served
@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.settings
    log_info(f"Green Pizza server running on port {settings.port} with {len(app.state.menu)} pizzas")
    yield
    log_info("Shutting down the Green Pizza server...")


def create_app(menu: Optional[Menu] = None, settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the order service around a fixed menu.

    The menu is stored on app.state and only ever read by the handlers,
    so an alternate menu can be injected for tests or other storefronts.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Green Pizza", version=__version__, lifespan=lifespan)
    app.state.menu = menu if menu is not None else DEFAULT_MENU
    app.state.settings = settings

    register_middleware(app)
    register_error_handlers(app)
    register_routes(app)
    mount_static(app, settings)
    return app


def register_middleware(app: FastAPI):
    # Set up a middleware to generate request_id for each request and log it
    @app.middleware("http")
    async def add_request_id(request: Request, call_next):
        """
        Reuse the caller's Request-ID header or generate one, and log the request with it.
        """
        request_id = request.headers.get("Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id

        log_info(f"Received request: {request.method} {request.url.path}", request_id=request_id)

        try:
            response = await call_next(request)
        except Exception as e:
            # unhandled errors become a JSON 500 that still carries the request id
            log_error(f"Unhandled error on {request.method} {request.url.path}: {e!r}", request_id=request_id)
            response = JSONResponse(content={"error": "Internal Server Error"}, status_code=500)
        # add the request_id to the response headers for tracking
        response.headers["Request-ID"] = request_id
        log_info(f"Completed request: {request.method} {request.url.path} with status {response.status_code}", request_id=request_id)
        return response


def _request_id(request: Request) -> str:
    return getattr(request.state, "request_id", "N/A")


def register_error_handlers(app: FastAPI):
    @app.exception_handler(OrderServiceError)
    async def order_service_error(request: Request, exc: OrderServiceError):
        log_warning(f"{request.method} {request.url.path} failed with {exc.status_code}: {exc.message}", request_id=_request_id(request))
        return JSONResponse(content={"error": exc.message}, status_code=exc.status_code)

    # a body that does not fit the order schema is reported like one with missing fields
    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError):
        log_warning(f"Invalid request body: {exc.errors()}", request_id=_request_id(request))
        error = BadRequest()
        return JSONResponse(content={"error": error.message}, status_code=error.status_code)


def register_routes(app: FastAPI):
    not_found = {404: {"model": ErrorResponse}}

    # API: /api/health - GET liveness check
    @app.get("/api/health", response_model=HealthResponse)
    def health():
        return HealthResponse(status="healthy", timestamp=utc_timestamp())

    # API: /api/menu - GET the full menu in display order
    @app.get("/api/menu", response_model=Menu)
    def read_menu(request: Request):
        return request.app.state.menu

    # API: /api/pizza/{pizza_id} - GET a single pizza
    @app.get("/api/pizza/{pizza_id}", response_model=MenuItem, responses=not_found)
    def read_pizza(request: Request, pizza_id: str):
        """
        Retrieve a pizza by id. Ids that are not numbers simply match nothing.
        """
        return find_pizza(request.app.state.menu, pizza_id)

    # API: /api/order - POST to place an order
    @app.post(
        "/api/order",
        response_model=OrderConfirmation,
        responses={400: {"model": ErrorResponse}, **not_found},
    )
    def create_order(request: Request, order: Optional[OrderRequest] = None):
        """
        Place an order and return its confirmation. Nothing is persisted.
        """
        confirmation = place_order(request.app.state.menu, order)
        log_info(f"Order {confirmation.order_id} confirmed", request_id=_request_id(request))
        log_debug(
            f"Order {confirmation.order_id}: {confirmation.quantity} x {confirmation.pizza} for {confirmation.customer_name}, total {confirmation.total_price}",
            request_id=_request_id(request),
        )
        return confirmation


def mount_static(app: FastAPI, settings: Settings):
    static_dir = settings.static_dir
    index_page = static_dir / "index.html"

    @app.get("/", include_in_schema=False)
    def index():
        return FileResponse(index_page, media_type="text/html")

    # Everything else that is not an API route comes from the static directory
    if static_dir.exists():
        app.mount("/", StaticFiles(directory=str(static_dir), html=True), name="static")
    else:
        log_warning(f"Static directory {static_dir} not found; only the API is served")


app = create_app()
