# Standard library imports
import logging
from collections import defaultdict
from typing import Any, Callable, Dict, List, Optional

# Local application imports
from ..constants import BlogFields, Collections, UserFields
from ..exceptions import DuplicateKeyError, ValidationError
from ..models.user import BlogSummary, User
from .document_store import DocumentStore

logger = logging.getLogger(__name__)

DUPLICATE_USERNAME_MESSAGE = "expected `username` to be unique"


class UserRegistry:
    """
    User accounts with unique usernames and salted password hashes.

    The pre-insert username lookup is only an early exit; the store's unique
    index on ``username`` is what actually decides a race between two
    registrations.
    """

    def __init__(self, store: DocumentStore, password_hasher: Callable[[str], str]) -> None:
        self.store = store
        self.password_hasher = password_hasher
        self._indexes_ensured = False

    async def ensure_indexes(self) -> None:
        """
        Declare the username uniqueness constraint to the store

        Raises:
            StoreError: If the store could not create the index
        """
        await self.store.ensure_unique_index(Collections.USERS, UserFields.USERNAME)
        self._indexes_ensured = True

    async def register(self, username: str, password: str, name: Optional[str] = None) -> User:
        """
        Register a new user

        Args:
            username: Unique login name, at least 3 characters
            password: Plain password, at least 3 characters; only its hash is stored
            name: Optional display name

        Returns:
            Created User domain model

        Raises:
            ValidationError: If a field is too short or the username is taken
            StoreError: If the username index is still missing and cannot be created
        """
        self._validate_credentials(username, password)

        if await self.find_by_username(username) is not None:
            raise ValidationError(DUPLICATE_USERNAME_MESSAGE, details={"field": UserFields.USERNAME})

        user = User(
            id=None,  # Will be set by the store
            username=username,
            name=name,
            password_hash=self.password_hasher(password),
        )

        # No insert without the unique index behind it
        if not self._indexes_ensured:
            await self.ensure_indexes()

        try:
            document = await self.store.insert(Collections.USERS, self._user_to_document(user))
        except DuplicateKeyError as exception:
            # Lost the race to a concurrent registration; the index is authoritative
            logger.info(f"Registration of '{username}' rejected by unique index")
            raise ValidationError(
                DUPLICATE_USERNAME_MESSAGE, details={"field": UserFields.USERNAME}
            ) from exception

        created = self._document_to_user(document)
        logger.info(f"Registered user {created.id} ({created.username})")
        return created

    async def list(self) -> List[User]:
        """
        List all users with the blogs each one owns

        Returns:
            User domain models with ``blogs`` populated
        """
        user_documents = await self.store.find_all(Collections.USERS)
        blog_documents = await self.store.find_all(Collections.BLOGS)

        owned: Dict[str, List[BlogSummary]] = defaultdict(list)
        for document in blog_documents:
            owner = document.get(BlogFields.OWNER)
            if owner is None:
                continue
            owned[str(owner)].append(
                BlogSummary(
                    id=str(document[BlogFields.MONGO_ID]),
                    title=document.get(BlogFields.TITLE, ""),
                    url=document.get(BlogFields.URL, ""),
                    author=document.get(BlogFields.AUTHOR),
                    likes=document.get(BlogFields.LIKES, 0),
                )
            )

        users = []
        for document in user_documents:
            user = self._document_to_user(document)
            user.blogs = owned.get(user.id, [])
            users.append(user)
        return users

    async def find_by_username(self, username: str) -> Optional[User]:
        """Find user by exact (case-sensitive) username"""
        if not username:
            return None
        document = await self.store.find_one(Collections.USERS, {UserFields.USERNAME: username})
        if document is None:
            return None
        return self._document_to_user(document)

    async def find_by_id(self, user_id: str) -> Optional[User]:
        """Find user by ID"""
        if not user_id:
            return None
        document = await self.store.find_by_id(Collections.USERS, user_id)
        if document is None:
            return None
        return self._document_to_user(document)

    def _validate_credentials(self, username: Any, password: Any) -> None:
        if not isinstance(username, str) or len(username) < UserFields.USERNAME_MIN_LENGTH:
            raise ValidationError(
                f"Username must be at least {UserFields.USERNAME_MIN_LENGTH} characters",
                details={"field": UserFields.USERNAME},
            )
        if not isinstance(password, str) or len(password) < UserFields.PASSWORD_MIN_LENGTH:
            raise ValidationError(
                f"Password must be at least {UserFields.PASSWORD_MIN_LENGTH} characters",
                details={"field": "password"},
            )

    def _document_to_user(self, document: Dict[str, Any]) -> User:
        """
        Convert a stored document to a User domain model

        Args:
            document: Document as returned by the store

        Returns:
            User domain model
        """
        if not document or UserFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        return User(
            id=str(document[UserFields.MONGO_ID]),
            username=document.get(UserFields.USERNAME, ""),
            name=document.get(UserFields.NAME),
            password_hash=document.get(UserFields.PASSWORD_HASH, ""),
        )

    def _user_to_document(self, user: User) -> Dict[str, Any]:
        """Convert a User to a storable document (never carries an id)"""
        return {
            UserFields.USERNAME: user.username,
            UserFields.NAME: user.name,
            UserFields.PASSWORD_HASH: user.password_hash,
        }
