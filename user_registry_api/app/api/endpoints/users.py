"""
User endpoints.

CRUD over the in-memory user store.  Handlers do no validation of
their own: request bodies are passed to the store as plain mappings
and every failure is translated by ``UserErrorRoute``.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Response, status

from ...schemas.user import UserRead
from ...services.user_service import UserStore
from ..dependencies import get_user_store
from ..errors import UserErrorRoute

router = APIRouter(route_class=UserErrorRoute)


@router.get("", response_model=List[UserRead])
async def list_users(store: UserStore = Depends(get_user_store)) -> List[UserRead]:
    """Return every user in insertion order."""
    return store.list_all()


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: str, store: UserStore = Depends(get_user_store)) -> UserRead:
    return store.get_by_id(user_id)


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(
    form: Optional[Dict[str, Any]] = Body(None),
    store: UserStore = Depends(get_user_store),
) -> UserRead:
    """Create a user from ``name`` and ``email`` and return it with its new id."""
    return store.create(form or {})


@router.patch("/{user_id}", response_model=UserRead)
async def update_user(
    user_id: str,
    form: Optional[Dict[str, Any]] = Body(None),
    store: UserStore = Depends(get_user_store),
) -> UserRead:
    """Partially update a user; fields absent from the body are kept."""
    return store.update(user_id, form or {})


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_user(user_id: str, store: UserStore = Depends(get_user_store)) -> Response:
    store.delete(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
