import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from database.dao.user import UserDAO
from models.user import User, UserStatus
from schemas.user import UserCreate
from utils.errors import ProvisioningError

logger = logging.getLogger(__name__)


async def find_or_create_user(dao: UserDAO, google_id: str, email: str, name: str) -> User:
    """
    Return the user for a Google subject, creating it on first sign-in.

    An existing record is returned as stored; email and name are not
    refreshed from the provider.

    Args:
        dao: User data access object bound to the request session
        google_id: Verified Google ``sub`` claim
        email: Email claim, used only when creating
        name: Display name claim, used only when creating

    Returns:
        The persisted user

    Raises:
        ProvisioningError: the database failed, or a concurrent sign-in won
            the insert and its row could not be read back
    """
    try:
        existing_user = await dao.get_by_google_id(google_id)
        if existing_user:
            return existing_user

        try:
            new_user = await dao.create(
                UserCreate(
                    google_id=google_id,
                    email=email,
                    name=name,
                    status=UserStatus.none,
                )
            )
        except IntegrityError as e:
            # Another request created the same google_id between our lookup
            # and insert; the unique constraint rejected ours.
            logger.warning(f"Concurrent user creation for google_id {google_id}: {e}")
            winner = await dao.get_by_google_id(google_id)
            if winner is None:
                raise ProvisioningError() from e
            return winner

    except SQLAlchemyError as e:
        logger.error(f"Error provisioning user for google_id {google_id}: {e}")
        raise ProvisioningError() from e

    logger.info(f"Created new user {email} with ID: {new_user.id}")
    return new_user
