# app/db/schema.py

from sqlalchemy import MetaData, Table, Column, String

metadata = MetaData()

# Placeholder shape; rows are owned and written by other systems.
users = Table(
    "users",
    metadata,
    Column("id", String, primary_key=True),
    Column("name", String, nullable=False),
    Column("email", String, nullable=False),
)
