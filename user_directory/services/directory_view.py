# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Derived view: search filter + fixed-size pagination.
Everything here is pure and never touches the roster it is given.
"""

import math
from typing import Sequence

from user_directory.models.domain import PAGE_SIZE, PageView, UserRecord


def matches(user: UserRecord, search_term: str) -> bool:
    term = search_term.lower()
    return (
        term in user.name.lower()
        or term in user.email.lower()
        or term in str(user.id).lower()
    )


def filter_users(users: Sequence[UserRecord], search_term: str) -> list[UserRecord]:
    if not search_term:
        return list(users)
    return [u for u in users if matches(u, search_term)]


def has_next_page(page: int, filtered_count: int, page_size: int = PAGE_SIZE) -> bool:
    return page * page_size < filtered_count


def has_prev_page(page: int) -> bool:
    return page > 1


def build_page(
    users: Sequence[UserRecord],
    search_term: str,
    page: int,
    page_size: int = PAGE_SIZE,
) -> PageView:
    """Visible slice is filtered[(page-1)*size : page*size]."""
    filtered = filter_users(users, search_term)
    start = (page - 1) * page_size
    end = page * page_size
    return PageView(
        users=filtered[start:end],
        page=page,
        filtered_count=len(filtered),
        total_pages=math.ceil(len(filtered) / page_size),
        has_prev_page=has_prev_page(page),
        has_next_page=has_next_page(page, len(filtered), page_size),
    )
