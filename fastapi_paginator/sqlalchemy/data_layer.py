"""SQLAlchemy data layer for paginated queries."""

from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.orm import Session
from sqlalchemy.ext.asyncio import AsyncSession

from fastapi_paginator.core.paginator import Paginator

logger = logging.getLogger(__name__)


class SQLAlchemyPageLoader:
    """Count and slice SQLAlchemy selects for a ``Paginator``."""

    paginator_class: type[Paginator] = Paginator

    def __init__(
        self,
        *,
        model: Any,
        session: Session | AsyncSession,
    ) -> None:
        """Store the SQLAlchemy model and session."""
        self.model = model
        self.session = session

    async def _execute(self, statement: Any) -> Any:
        if isinstance(self.session, AsyncSession):
            result = await self.session.execute(statement)
            return result
        return self.session.execute(statement)

    def _statement(self, statement: Any | None) -> Any:
        return select(self.model) if statement is None else statement

    async def count(self, statement: Any | None = None) -> int:
        """Return the number of rows the statement selects."""
        subquery = self._statement(statement).order_by(None).subquery()
        result = await self._execute(select(func.count()).select_from(subquery))
        return int(result.scalar_one())

    async def fetch_page(self, paginator: Paginator, statement: Any | None = None) -> list[Any]:
        """Return the model instances on the paginator's current page."""
        first = paginator.current_page_first_item
        if first is None or first < 1 or paginator.items_per_page < 1:
            return []
        page_statement = (
            self._statement(statement)
            .offset(first - 1)
            .limit(paginator.items_per_page)
        )
        logger.debug(
            "Fetching page %s of %s (offset=%s, limit=%s)",
            paginator.current_page,
            self.model,
            first - 1,
            paginator.items_per_page,
        )
        result = await self._execute(page_statement)
        return list(result.scalars().all())

    async def paginate(
        self,
        *,
        current_page: int,
        items_per_page: int,
        url_pattern: str = "",
        statement: Any | None = None,
        **options: Any,
    ) -> tuple[Paginator, list[Any]]:
        """Count, build a paginator and fetch the current page in one call."""
        total = await self.count(statement)
        paginator = self.paginator_class(
            total, items_per_page, current_page, url_pattern, **options
        )
        items = await self.fetch_page(paginator, statement)
        return paginator, items
