"""Routy API / API routes."""

from fastapi import APIRouter

from spolky.api import audit, auth, clubs, dogs, exhibitions

api_router = APIRouter(prefix="/api")

api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(clubs.router, prefix="/clubs", tags=["clubs"])
api_router.include_router(audit.router, prefix="/audit", tags=["audit"])
api_router.include_router(dogs.router, prefix="/dogs", tags=["dogs"])
api_router.include_router(exhibitions.router, prefix="/exhibitions", tags=["exhibitions"])
