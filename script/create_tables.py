# create_tables.py
from sqlalchemy import inspect

from app.database import ENGINE
from app.database.base_class import Base
from app.model import users, questions, attempts  # noqa: F401

Base.metadata.create_all(bind=ENGINE)
print("Tables created.")

inspector = inspect(ENGINE)
print("Existing tables:", inspector.get_table_names())
