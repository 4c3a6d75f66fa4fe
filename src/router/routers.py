# src/router/routers.py

from fastapi import FastAPI
from src.modules.search.search_controller import router as search_router

def include_routers(app: FastAPI) -> None:
    app.include_router(search_router)
