"""
Main API router that combines all route modules
"""
from fastapi import APIRouter
from .auth import router as auth_router
from .workers import router as workers_router
from .connections import router as connections_router
from .chat import router as chat_router
from .contact import router as contact_router

api_router = APIRouter()

# Include all route modules
api_router.include_router(auth_router)
api_router.include_router(workers_router)
api_router.include_router(connections_router)
api_router.include_router(chat_router)
api_router.include_router(contact_router)
