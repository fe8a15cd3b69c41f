import logging
from fastapi import FastAPI
from contextlib import asynccontextmanager
from sqlmodel import Session

from app.core.config import settings
from app.core.logging import setup_logging
from app.db.session import engine, create_db_and_tables
from app.db.seed import seed_items

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    create_db_and_tables()
    if settings.SEED_CATALOG:
        with Session(engine) as session:
            seed_items(session)
    logger.info("%s started", settings.PROJECT_NAME)
    yield

app = FastAPI(
    title=settings.PROJECT_NAME,
    version="1.0.0",
    lifespan=lifespan,
    description="Users, catalog, cart and order history secured with JWT bearer tokens"
)

@app.get("/")
def read_root():
    return {"message": f"Welcome to {settings.PROJECT_NAME}. Visit /docs for Swagger UI."}

@app.get("/health")
def health():
    return {"status": "ok"}

from app.routers import auth, users, cart, orders, items

app.include_router(auth.router, tags=["auth"])
app.include_router(users.router, prefix="/api/user", tags=["user"])
app.include_router(cart.router, prefix="/api/cart", tags=["cart"])
app.include_router(orders.router, prefix="/api/order", tags=["order"])
app.include_router(items.router, prefix="/api/item", tags=["item"])

# Add CORS
from fastapi.middleware.cors import CORSMiddleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
