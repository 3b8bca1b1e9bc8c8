"""
Main API router
"""
from fastapi import APIRouter
from canva_bridge.api import auth, designs

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/oauth", tags=["authentication"])
api_router.include_router(designs.router, tags=["designs"])
