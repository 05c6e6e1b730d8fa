"""Shared HTTP primitives for the resource clients."""

from __future__ import annotations

from sparkapi.clients.http.pagination import PageSet, Paginator, next_page_url

__all__ = ["PageSet", "Paginator", "next_page_url"]
