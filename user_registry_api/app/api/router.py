"""
Top-level router.

Aggregates the domain routers under their path prefixes.  When new
domains are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
