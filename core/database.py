# -*- coding: utf-8 -*-
# @version        : 1.0
# @Update Time    : 2024/4/18
# @File           : database.py
# @desc           : SQLAlchemy


from typing import AsyncGenerator
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker, AsyncAttrs, AsyncEngine
from sqlalchemy.orm import DeclarativeBase, declared_attr
from sqlalchemy.pool import StaticPool
from config.settings import SQLALCHEMY_DATABASE_URL, DB_ECHO


def engine_factory(url: str = SQLALCHEMY_DATABASE_URL, echo: bool = DB_ECHO) -> AsyncEngine:
    """
    sqlite keeps a single shared connection, other backends get a pool
    """
    if url.startswith("sqlite"):
        return create_async_engine(
            url,
            echo=echo,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False}
        )
    return create_async_engine(
        url,
        echo=echo,
        echo_pool=False,
        pool_pre_ping=True,
        pool_recycle=3600,
        pool_size=5,
        max_overflow=5,
        connect_args={}
    )


# Create db engine
async_engine = engine_factory()

# create db session
session_factory = async_sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=async_engine,
    expire_on_commit=True,
    class_=AsyncSession
)


class Base(AsyncAttrs, DeclarativeBase):
    @declared_attr.directive
    def __tablename__(cls) -> str:
        """
        lower case table name
        custom __tablename__ wins, otherwise CamelCase becomes camel_case
        """
        table_name = cls.__dict__.get("__tablename__")
        if not table_name:
            model_name = cls.__name__
            ls = []
            for index, char in enumerate(model_name):
                if char.isupper() and index != 0:
                    ls.append("_")
                ls.append(char)
            table_name = "".join(ls).lower()
        return table_name


async def create_tables(engine: AsyncEngine = async_engine) -> None:
    """
    create all tables registered on Base
    """
    # register models on Base.metadata
    import apps.admin.model  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def db_getter() -> AsyncGenerator[AsyncSession, None]:
    """
    get db session
    """
    async with session_factory() as session:
        async with session.begin():
            yield session
