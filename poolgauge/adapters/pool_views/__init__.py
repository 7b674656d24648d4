"""Adapters exposing third-party pools through the Pool protocol."""

from poolgauge.adapters.pool_views.sqlalchemy import SQLAlchemyPoolView

__all__ = ["SQLAlchemyPoolView"]
