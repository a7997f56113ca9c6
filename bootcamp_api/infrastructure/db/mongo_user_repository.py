# Standard library imports
import logging
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo.errors import DuplicateKeyError, PyMongoError

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User
from ...domain.constants import UserFields, UserRoles
from ...domain.exceptions import ConflictError, DatabaseError, NotFoundError
from .mongo_connection import get_user_collection

logger = logging.getLogger(__name__)


class MongoUserRepository(UserRepository):
    """MongoDB implementation of UserRepository"""

    def __init__(self, user_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.user_collection = user_collection if user_collection is not None else get_user_collection()

    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find user by email address

        Args:
            email: Email address to search for

        Returns:
            User domain model if found, None otherwise
        """
        if not email:
            return None

        try:
            document = await self.user_collection.find_one({UserFields.EMAIL: email})
        except PyMongoError as e:
            logger.error(f"Error finding user by email: {e}")
            raise DatabaseError(f"Error finding user by email: {str(e)}")

        return self._document_to_user(document) if document else None

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID; malformed IDs are treated as not found"""
        if not user_id:
            return None

        try:
            object_id = ObjectId(user_id)
        except (InvalidId, TypeError):
            return None

        try:
            document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
        except PyMongoError as e:
            logger.error(f"Error finding user by ID {user_id}: {e}")
            raise DatabaseError(f"Error finding user by ID: {str(e)}")

        return self._document_to_user(document) if document else None

    async def save(self, user: User) -> User:
        """
        Save user (create new or update existing)

        Args:
            user: User domain model to save

        Returns:
            Saved User domain model with ID set

        Raises:
            ConflictError: If the email is already registered
            NotFoundError: If updating a user that does not exist
            DatabaseError: On any other driver failure
        """
        user_dict = self._user_to_dict(user)

        try:
            if user.id:
                object_id = ObjectId(user.id)
                update_result = await self.user_collection.update_one(
                    {UserFields.MONGO_ID: object_id},
                    {"$set": user_dict},
                )
                if update_result.matched_count == 0:
                    raise NotFoundError(f"User with ID {user.id} not found")
                document = await self.user_collection.find_one({UserFields.MONGO_ID: object_id})
            else:
                result = await self.user_collection.insert_one(user_dict)
                document = await self.user_collection.find_one({UserFields.MONGO_ID: result.inserted_id})
        except InvalidId:
            raise NotFoundError(f"User with ID {user.id} not found")
        except DuplicateKeyError:
            raise ConflictError("User with this email already exists")
        except PyMongoError as e:
            logger.error(f"Error saving user {user.email}: {e}")
            raise DatabaseError(f"Error saving user: {str(e)}")

        if document is None:
            raise DatabaseError("User was saved but could not be retrieved")
        return self._document_to_user(document)

    def _document_to_user(self, document: dict) -> User:
        """Convert MongoDB document to User domain model"""
        return User(
            id=str(document[UserFields.MONGO_ID]),
            full_name=document.get(UserFields.FULL_NAME, ""),
            email=document.get(UserFields.EMAIL, ""),
            hashed_password=document.get(UserFields.HASHED_PASSWORD, ""),
            role=document.get(UserFields.ROLE, UserRoles.USER),
        )

    def _user_to_dict(self, user: User) -> dict:
        """Convert User domain model to MongoDB document (without _id)"""
        return {
            UserFields.FULL_NAME: user.full_name,
            UserFields.EMAIL: user.email,
            UserFields.HASHED_PASSWORD: user.hashed_password,
            UserFields.ROLE: user.role,
        }
