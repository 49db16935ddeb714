from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from link_shortener.database.connection import Base

# Ids live in a 32-bit INTEGER column
MIN_LINK_ID = -2**31
MAX_LINK_ID = 2**31 - 1


class Link(Base):
    """
    A shortened link.

    ``id`` is handed out by the database and doubles as the short code.
    ``count`` only ever moves up, one step per successful redirect.
    """
    __tablename__ = "links"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    link: Mapped[str] = mapped_column(Text, nullable=False)
    count: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")

    def __repr__(self) -> str:
        return f"<Link id={self.id} count={self.count} link={self.link!r}>"
