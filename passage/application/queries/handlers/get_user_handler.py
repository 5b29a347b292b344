"""Get user query handler.

Returns the public view of a user by ID.
"""

from passage.application.dtos import PublicUser
from passage.application.queries.auth_queries import GetUser
from passage.core.enums import ErrorCode
from passage.core.errors import NotFoundError
from passage.core.result import Failure, Result, Success
from passage.domain.protocols import UserRepository


class GetUserHandler:
    """Handler for getting a single user."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(self, query: GetUser) -> Result[PublicUser, NotFoundError]:
        """Handle get user query.

        Returns:
            Success(PublicUser) or Failure(NotFoundError).
        """
        user = await self._user_repo.find_by_id(query.user_id)
        if user is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.USER_NOT_FOUND,
                    message="User not found",
                    resource_type="User",
                    resource_id=str(query.user_id),
                )
            )
        return Success(value=PublicUser.from_entity(user))
