from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.auth_router import router as auth_router
from app.config import settings
from app.database import check_health, close_database, connect_database
from app.dependencies import DBConn
from app.exception_handlers import register_exception_handlers
from app.logging_config import setup_logging
from app.stats.router import router as stats_router
from app.transactions.router import expense_router, income_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    app.state.db = await connect_database(settings.db_path)
    yield
    await close_database(app.state.db)
    app.state.db = None


app = FastAPI(
    title="Finance Tracker",
    description="Personal income and expense tracker with analytics",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(auth_router, prefix="/api/v1/auth", tags=["auth"])
app.include_router(income_router, prefix="/api/v1/incomes", tags=["incomes"])
app.include_router(expense_router, prefix="/api/v1/expenses", tags=["expenses"])
app.include_router(stats_router, prefix="/api/v1/stats", tags=["stats"])


@app.get("/api/v1/health")
async def health(db: DBConn):
    await check_health(db)
    return {"status": "healthy"}
