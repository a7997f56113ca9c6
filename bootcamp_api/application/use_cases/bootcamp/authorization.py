# Standard library imports
import logging

# Local application imports
from ....domain.models.bootcamp import Bootcamp
from ....domain.exceptions import OwnershipError
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


def ensure_can_modify(bootcamp: Bootcamp, current_user: UserResponse, action: str) -> None:
    """
    Allow the bootcamp owner or an admin through

    Args:
        bootcamp: Bootcamp being modified
        current_user: Authenticated caller
        action: Verb used in the error message ("update", "delete")

    Raises:
        OwnershipError: If the caller is neither owner nor admin
    """
    if bootcamp.is_owned_by(current_user.id) or current_user.is_admin:
        return

    logger.warning(
        f"User {current_user.id} ({current_user.role}) tried to {action} bootcamp {bootcamp.id} "
        f"owned by {bootcamp.user}"
    )
    raise OwnershipError(f"User {current_user.id} is not authorized to {action} this bootcamp")
