# Standard library imports
import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional

# Local application imports
from ..constants import BlogFields, Collections, UserFields
from ..exceptions import NotFoundError, StoreError, ValidationError
from ..models.blog import BlogEntry, OwnerSummary
from .document_store import DocumentStore

logger = logging.getLogger(__name__)


class BlogRepository:
    """
    Blog entry persistence with the entry invariants enforced on every write.

    Every entry built here goes through ``BlogEntry`` validation before the
    store sees it, so a rejected create or update never reaches storage.
    """

    def __init__(self, store: DocumentStore) -> None:
        self.store = store

    async def list_all(self) -> List[BlogEntry]:
        """
        List all blog entries in storage order

        Returns:
            BlogEntry models with ``owner_profile`` resolved where the owner exists
        """
        documents = await self.store.find_all(Collections.BLOGS)
        entries = [self._document_to_blog(document) for document in documents]
        await self._attach_owners(entries)
        return entries

    async def create(self, data: Mapping[str, Any], acting_owner: Optional[str] = None) -> BlogEntry:
        """
        Create a new blog entry

        Identifier fields in ``data`` are dropped; the store always assigns a
        fresh id. Missing ``likes`` defaults to 0.

        Args:
            data: Client supplied blog fields
            acting_owner: ID of the user recorded as owner, if known

        Returns:
            Created BlogEntry with its store-assigned id

        Raises:
            ValidationError: If title or url is missing or a field is malformed
        """
        fields = {k: v for k, v in data.items() if k not in BlogFields.IDENTIFIER_FIELDS}

        likes = fields.get(BlogFields.LIKES)
        entry = BlogEntry(
            id=None,
            title=fields.get(BlogFields.TITLE),
            url=fields.get(BlogFields.URL),
            author=fields.get(BlogFields.AUTHOR),
            likes=0 if likes is None else likes,
            owner=acting_owner,
        )

        document = await self.store.insert(Collections.BLOGS, self._blog_to_document(entry))
        created = self._document_to_blog(document)
        await self._attach_owners([created])

        logger.info(f"Created blog {created.id} (owner={created.owner})")
        return created

    async def get_by_id(self, blog_id: str) -> BlogEntry:
        """
        Get a blog entry by ID

        Raises:
            NotFoundError: If no entry has this id
        """
        document = await self.store.find_by_id(Collections.BLOGS, blog_id)
        if document is None:
            raise NotFoundError(f"Blog {blog_id} not found", details={"id": blog_id})

        entry = self._document_to_blog(document)
        await self._attach_owners([entry])
        return entry

    async def update(self, blog_id: str, fields: Mapping[str, Any]) -> BlogEntry:
        """
        Merge the supplied fields onto an existing entry

        Fields absent from ``fields`` are left unchanged. The merged entry is
        validated as a whole before the patch is written.

        Args:
            blog_id: ID of the entry to update
            fields: Partial set of updatable fields

        Returns:
            The full updated BlogEntry

        Raises:
            NotFoundError: If no entry has this id, whatever the fields
            ValidationError: If a field is unknown or malformed
        """
        existing = await self.get_by_id(blog_id)

        patch = {k: v for k, v in fields.items() if k not in BlogFields.IDENTIFIER_FIELDS}
        unknown = sorted(set(patch) - set(BlogFields.UPDATABLE_FIELDS))
        if unknown:
            raise ValidationError(
                f"Unknown blog field(s): {', '.join(unknown)}",
                details={"fields": unknown},
            )

        merged = BlogEntry(
            id=existing.id,
            title=patch.get(BlogFields.TITLE, existing.title),
            url=patch.get(BlogFields.URL, existing.url),
            author=patch.get(BlogFields.AUTHOR, existing.author),
            likes=patch.get(BlogFields.LIKES, existing.likes),
            owner=patch.get(BlogFields.OWNER, existing.owner),
        )
        merged_document = self._blog_to_document(merged)
        update = {key: merged_document[key] for key in patch}

        document = await self.store.update_by_id(Collections.BLOGS, blog_id, update)
        if document is None:
            # Removed between the read and the write
            raise NotFoundError(f"Blog {blog_id} not found", details={"id": blog_id})

        updated = self._document_to_blog(document)
        await self._attach_owners([updated])

        logger.info(f"Updated blog {blog_id} fields={sorted(update)}")
        return updated

    async def delete(self, blog_id: str) -> bool:
        """Delete a blog entry; True if a record was actually removed"""
        removed = await self.store.delete_by_id(Collections.BLOGS, blog_id)
        if removed:
            logger.info(f"Deleted blog {blog_id}")
        else:
            logger.debug(f"Delete of blog {blog_id} matched nothing")
        return removed

    async def _attach_owners(self, entries: Iterable[BlogEntry]) -> None:
        """Resolve each entry's owner id to an OwnerSummary by explicit lookup"""
        resolved: Dict[str, Optional[OwnerSummary]] = {}
        for entry in entries:
            if not entry.owner:
                continue
            if entry.owner not in resolved:
                document = await self.store.find_by_id(Collections.USERS, entry.owner)
                resolved[entry.owner] = self._document_to_owner(document) if document else None
            entry.owner_profile = resolved[entry.owner]

    def _document_to_owner(self, document: Dict[str, Any]) -> OwnerSummary:
        return OwnerSummary(
            id=str(document[UserFields.MONGO_ID]),
            username=document.get(UserFields.USERNAME, ""),
            name=document.get(UserFields.NAME),
        )

    def _document_to_blog(self, document: Dict[str, Any]) -> BlogEntry:
        """
        Convert a stored document to a BlogEntry domain model

        Args:
            document: Document as returned by the store

        Returns:
            BlogEntry domain model

        Raises:
            StoreError: If the stored document breaks the entry invariants
        """
        if not document or BlogFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")

        blog_id = str(document[BlogFields.MONGO_ID])
        owner = document.get(BlogFields.OWNER)
        try:
            return BlogEntry(
                id=blog_id,
                title=document.get(BlogFields.TITLE, ""),
                url=document.get(BlogFields.URL, ""),
                author=document.get(BlogFields.AUTHOR),
                likes=document.get(BlogFields.LIKES, 0),
                owner=str(owner) if owner is not None else None,
            )
        except ValidationError as e:
            logger.error(f"Stored blog {blog_id} is invalid: {e.message}")
            raise StoreError("Stored blog document is invalid", details={"id": blog_id}) from e

    def _blog_to_document(self, entry: BlogEntry) -> Dict[str, Any]:
        """Convert a BlogEntry to a storable document (never carries an id)"""
        return {
            BlogFields.TITLE: entry.title,
            BlogFields.AUTHOR: entry.author,
            BlogFields.URL: entry.url,
            BlogFields.LIKES: entry.likes,
            BlogFields.OWNER: entry.owner,
        }
