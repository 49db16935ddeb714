import logging
from typing import List

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Row
from sqlalchemy.exc import NoResultFound
from sqlalchemy.orm import Session

from link_shortener.models.link import Link

logger = logging.getLogger(__name__)


class LinkNotFoundError(Exception):
    """No link row matched the requested id."""

    def __init__(self, link_id: int):
        self.link_id = link_id
        super().__init__(f"Link {link_id} not found")


class LinkService:
    """
    Data access for links, one SQL statement per operation.

    The session is injected per request; the pool behind it is shared by
    the whole process. Nothing here retries: any database error other than
    a missing row propagates to the caller unchanged.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> List[Link]:
        """Every link in the table, in whatever order the database returns."""
        return list(self.db.scalars(select(Link)))

    def insert(self, url: str) -> Row:
        """
        Store a new link with ``count = 0`` and return the created row.

        The id comes back through RETURNING, so the caller sees exactly what
        was written.
        """
        stmt = (
            insert(Link)
            .values(link=url, count=0)
            .returning(Link.id, Link.link, Link.count)
        )
        created = self.db.execute(stmt).one()
        self.db.commit()

        logger.info("Created link %s -> %s", created.id, created.link)
        return created

    def delete(self, link_id: int) -> Row:
        """
        Remove a link and return the row as it was just before deletion.

        Raises:
            LinkNotFoundError: if no row matched. Deleting a missing link is
                an error, not a silent no-op.
        """
        stmt = (
            delete(Link)
            .where(Link.id == link_id)
            .returning(Link.id, Link.link, Link.count)
            .execution_options(synchronize_session=False)
        )
        try:
            deleted = self.db.execute(stmt).one()
        except NoResultFound:
            self.db.rollback()
            raise LinkNotFoundError(link_id) from None
        self.db.commit()

        logger.info("Deleted link %s", link_id)
        return deleted

    def find(self, link_id: int) -> Link:
        """Raises LinkNotFoundError if no row matched."""
        stmt = select(Link).where(Link.id == link_id).limit(1)
        try:
            return self.db.scalars(stmt).one()
        except NoResultFound:
            raise LinkNotFoundError(link_id) from None

    def increment(self, link_id: int) -> None:
        """Add one to the link's counter. Missing ids are a no-op."""
        stmt = (
            update(Link)
            .where(Link.id == link_id)
            .values(count=Link.count + 1)
            .execution_options(synchronize_session=False)
        )
        self.db.execute(stmt)
        self.db.commit()

    def resolve(self, link_id: int) -> str:
        """
        Look up the destination for ``link_id`` and count the visit.

        This is two statements, a SELECT then an UPDATE, with no transaction
        tying them together. A delete that lands in between turns the
        increment into a no-op, and concurrent resolutions each see the
        count as it was before their own increment.
        """
        # Read the URL before the commit in increment() expires the object
        url = self.find(link_id).link
        self.increment(link_id)

        logger.debug("Resolved link %s -> %s", link_id, url)
        return url
