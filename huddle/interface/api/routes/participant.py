"""Acting participant header."""

from typing import Annotated

from fastapi import Header, HTTPException, status


async def current_participant(
    x_participant: Annotated[str | None, Header()] = None,
) -> str:
    """Read the acting participant from the X-Participant header.

    Raises:
        HTTPException: If the header is missing or blank
    """
    if not x_participant or not x_participant.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="X-Participant header required",
        )
    return x_participant.strip()
