import logging
from contextlib import asynccontextmanager
from typing import Callable, List, Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from pymongo import MongoClient

from auth import require_admin
from catalog import CatalogService
from config import Settings, get_settings
from database import Store, init_store
from errors import NotFoundError, ValidationError, register_error_handlers
from orders import OrderService
from schemas import MAX_ID, OrderRequest, OrderSummary, Product, ProductIn, WaitlistRequest
from seed import seed_catalog
from waitlist import WaitlistService

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# ----- Utilities -----

def parse_id(id_str: str) -> int:
    try:
        value = int(id_str)
    except (TypeError, ValueError):
        raise ValidationError("Invalid ID format")
    # No product is stored outside the sequence range
    if value < 1 or value > MAX_ID:
        raise NotFoundError("Product not found")
    return value


def get_store(request: Request) -> Store:
    return request.app.state.store


def get_catalog(store: Store = Depends(get_store)) -> CatalogService:
    return CatalogService(store)


def get_orders(store: Store = Depends(get_store)) -> OrderService:
    return OrderService(store)


def get_waitlist(store: Store = Depends(get_store)) -> WaitlistService:
    return WaitlistService(store)


# ----- Health -----
health = APIRouter()


@health.get("/")
def read_root():
    return {"message": "Storefront API running"}


@health.get("/test")
def test_database(request: Request):
    response = {
        "backend": "✅ Running",
        "database": "❌ Not Available",
        "database_name": None,
        "collections": [],
    }
    store = getattr(request.app.state, "store", None)
    if store is None:
        return response
    response["database_name"] = store.db.name
    try:
        response["collections"] = store.db.list_collection_names()[:10]
        response["database"] = "✅ Connected & Working"
    except Exception as e:
        response["database"] = f"⚠️ Connected but Error: {str(e)[:80]}"
    return response


# ----- Storefront -----
api = APIRouter(prefix="/api")


@api.get("/products", response_model=List[Product])
def list_products(catalog: CatalogService = Depends(get_catalog)):
    return catalog.list_products()


@api.get("/products/{product_id}", response_model=Product)
def get_product(product_id: str, catalog: CatalogService = Depends(get_catalog)):
    return catalog.get_product(parse_id(product_id))


@api.post("/waitlist", status_code=201)
def join_waitlist(body: WaitlistRequest, waitlist: WaitlistService = Depends(get_waitlist)):
    waitlist.join(body.email)
    return {"success": True}


@api.post("/orders", status_code=201)
def place_order(req: OrderRequest, orders: OrderService = Depends(get_orders)):
    order_id = orders.place_order(req)
    return {"success": True, "orderId": order_id}


# ----- Admin -----
admin = APIRouter(prefix="/api/admin", dependencies=[Depends(require_admin)])


@admin.post("/products", status_code=201)
def create_product(product: ProductIn, catalog: CatalogService = Depends(get_catalog)):
    return {"id": catalog.create_product(product)}


@admin.put("/products/{product_id}")
def update_product(product_id: str, product: ProductIn, catalog: CatalogService = Depends(get_catalog)):
    catalog.update_product(parse_id(product_id), product)
    return {"success": True}


@admin.delete("/products/{product_id}")
def delete_product(product_id: str, catalog: CatalogService = Depends(get_catalog)):
    catalog.delete_product(parse_id(product_id))
    return {"success": True}


@admin.get("/orders", response_model=List[OrderSummary])
def list_orders(orders: OrderService = Depends(get_orders)):
    return orders.list_orders_with_summary()


# ----- Application -----

@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    configure_logging(settings.log_level)
    store = Store.open(settings, app.state.client_factory)
    init_store(store)
    if settings.seed_catalog:
        seed_catalog(store)
    app.state.store = store
    logger.info("Storefront API ready")
    yield
    app.state.store = None
    store.close()


def create_app(settings: Optional[Settings] = None, client_factory: Callable = MongoClient) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title="Storefront API", lifespan=lifespan)
    app.state.settings = settings
    app.state.client_factory = client_factory
    app.state.store = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.include_router(health)
    app.include_router(api)
    app.include_router(admin)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=app.state.settings.port)
