"""Example FastAPI app rendering paginated article listings.

Run with:
    uvicorn examples.paginator_example_app:app --reload
"""
from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Depends, FastAPI, Query, Request
from fastapi.responses import HTMLResponse
from markupsafe import Markup, escape
from sqlalchemy import Column, Integer, String, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

from fastapi_paginator.dependencies import PageParams, page_params, paginator_from_request
from fastapi_paginator.middleware import ErrorHandlerMiddleware
from fastapi_paginator.pagination import PageNumberPagination
from fastapi_paginator.sqlalchemy import SQLAlchemyPageLoader
from fastapi_paginator.utils import parse_page_params

DATABASE_URL = "sqlite+aiosqlite://"

engine = create_async_engine(DATABASE_URL, poolclass=StaticPool)
async_session = async_sessionmaker(engine, expire_on_commit=False)

Base = declarative_base()


class Article(Base):
    __tablename__ = "articles"

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=False)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    async with async_session() as session:
        yield session


async def seed_example_data(session: AsyncSession, count: int = 95) -> None:
    """Insert example articles if the table is empty."""
    result = await session.execute(select(Article.id).limit(1))
    if result.first() is not None:
        return
    session.add_all(Article(title=f"Article {number}") for number in range(1, count + 1))
    await session.commit()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)
    async with async_session() as session:
        await seed_example_data(session)
    yield


app = FastAPI(
    title="FastAPI Paginator Example",
    description="Example listing showcasing page-window pagination.",
    version="0.1.0",
    lifespan=lifespan,
)
app.add_middleware(ErrorHandlerMiddleware)


@app.get("/articles", response_class=HTMLResponse)
async def list_articles(
    request: Request,
    params: PageParams = Depends(page_params),
    max_pages: int = Query(10),
    session: AsyncSession = Depends(get_session),
) -> str:
    loader = SQLAlchemyPageLoader(model=Article, session=session)
    statement = select(Article).order_by(Article.id)
    total = await loader.count(statement)
    paginator = paginator_from_request(
        request, total, params, max_pages_to_show=max_pages
    )
    articles = await loader.fetch_page(paginator, statement)
    rows = Markup("").join(
        Markup("<li>{}</li>").format(article.title) for article in articles
    )
    summary = ""
    if paginator.current_page_first_item is not None:
        summary = (
            f"Showing {paginator.current_page_first_item}-"
            f"{paginator.current_page_last_item} of {paginator.total_items}"
        )
    return Markup("<p>{}</p><ul class=\"articles\">{}</ul>{}").format(
        escape(summary), rows, paginator
    )


@app.get("/api/articles")
async def list_articles_json(
    request: Request,
    session: AsyncSession = Depends(get_session),
) -> dict:
    params = parse_page_params(request.query_params)
    params["base_url"] = str(request.url)
    pagination = PageNumberPagination()
    loader = SQLAlchemyPageLoader(model=Article, session=session)
    statement = select(Article).order_by(Article.id)
    total = await loader.count(statement)
    paginator = pagination.get_paginator(total=total, params=params)
    articles = await loader.fetch_page(paginator, statement)
    return {
        "data": [{"id": str(article.id), "title": article.title} for article in articles],
        "links": pagination.get_links(total=total, params=params),
        "meta": pagination.get_meta(total=total, params=params),
    }

