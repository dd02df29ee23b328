# routers/__init__.py
from .locations import router as locations
from .settings import router as settings
