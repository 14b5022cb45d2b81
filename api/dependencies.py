"""
API dependencies for dependency injection
"""

from uuid import UUID

from fastapi import Query


def get_user_id(
    user_id: UUID = Query(..., description="ID of the user whose data is accessed"),
) -> UUID:
    """
    Current user dependency for FastAPI routes.

    Usage:
        @router.get("/example")
        def example(user_id: UUID = Depends(get_user_id)):
            ...
    """
    return user_id
