"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from taskmanager.api.routes import auth, users, categories, tasks

api_router = APIRouter()

# Include all route modules
api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(categories.router)
api_router.include_router(tasks.router)
