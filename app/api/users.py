# app/api/users.py

import logging
from typing import List

from fastapi import APIRouter, Depends
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from sqlalchemy import literal_column, select
from sqlalchemy.engine import Engine

from app.db.engine import get_engine
from app.db.schema import users
from app.models.users import User

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["users"])

FETCH_ERROR = "Failed to fetch users"


# User documents the shape only; rows are returned as the store holds them.
@router.get("/users", responses={200: {"model": List[User]}})
def list_users(engine: Engine = Depends(get_engine)):
    """
    Return every user row, in whatever order the store hands them back.
    """
    try:
        with engine.connect() as conn:
            # every column the table carries, not only the declared ones
            stmt = select(literal_column("*")).select_from(users)
            rows = conn.execute(stmt).mappings().all()
    except Exception:
        logger.exception("Database error while fetching users")
        return JSONResponse(status_code=500, content={"error": FETCH_ERROR})

    return jsonable_encoder([dict(row) for row in rows])
