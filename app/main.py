import logging

from fastapi import FastAPI

from app.api.users import router as users_router
from app.web.page import router as page_router

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
)

app = FastAPI(
    title="Users API",
    version="0.1.0",
)

app.include_router(users_router)
app.include_router(page_router)
