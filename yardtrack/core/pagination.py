"""Page/size pagination shared by every list endpoint."""

import math
from dataclasses import dataclass
from typing import Any

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from yardtrack.api.core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from yardtrack.api.core.messages import PaginationInfo


@dataclass(frozen=True)
class PageRequest:
    """A normalized page request.

    Out-of-range values are not rejected: a page below 1 becomes the first
    page and a size outside 1..MAX_PAGE_SIZE falls back to the default size.
    """

    page: int = DEFAULT_PAGE
    size: int = DEFAULT_PAGE_SIZE

    @classmethod
    def normalize(cls, page: int | None, size: int | None) -> "PageRequest":
        if page is None or page < 1:
            page = DEFAULT_PAGE
        if size is None or size < 1 or size > MAX_PAGE_SIZE:
            size = DEFAULT_PAGE_SIZE
        return cls(page=page, size=size)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.size


@dataclass
class Page:
    items: list[Any]
    pagination: PaginationInfo


def build_pagination(total: int, page_request: PageRequest) -> PaginationInfo:
    total_pages = math.ceil(total / page_request.size) if total else 0
    return PaginationInfo(
        total=total,
        page=page_request.page,
        size=page_request.size,
        total_pages=total_pages,
        has_more=page_request.page < total_pages,
    )


async def paginate(
    db: AsyncSession, stmt: Select, page_request: PageRequest
) -> Page:
    """Run a select for one page and count the full result set."""
    count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
    total = (await db.execute(count_stmt)).scalar_one()

    result = await db.execute(
        stmt.offset(page_request.offset).limit(page_request.size)
    )
    items = list(result.scalars().unique().all())

    return Page(items=items, pagination=build_pagination(total, page_request))
