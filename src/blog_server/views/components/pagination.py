from htpy import Node, a, div, span

from blog_server.utils import total_pages


def _page_link(*, label: str, href: str, disabled: bool) -> Node:
    return a(
        href=None if disabled else href,
        class_="pagination-btn" + (" disabled" if disabled else ""),
        aria_disabled="true" if disabled else None,
    )[label]


def render_pagination(*, path: str, total: int, page: int, limit: int) -> Node:
    pages = total_pages(total, limit)

    return div(class_="pagination")[
        _page_link(label="← Previous", href=f"{path}?page={page - 1}&limit={limit}", disabled=page <= 1),
        span(class_="pagination-info")[f"Page {page} of {pages}"],
        _page_link(label="Next →", href=f"{path}?page={page + 1}&limit={limit}", disabled=page >= pages),
    ]
