from htpy import Node, a, div, p, span, table, tbody, td, th, thead, tr

from blog_server.schemas.authors import AuthorListItem
from blog_server.views.components.pagination import render_pagination
from blog_server.views.components.time import render_time
from blog_server.views.layout import render_page


def render_authors_list(*, authors: list[AuthorListItem], total: int, page: int, limit: int) -> Node:
    content = div(class_="authors-list-page")[
        div(class_="list-header")[p[span[str(total)], " authors total"]],
        div(class_="authors-table-wrapper")[
            table(class_="authors-table")[
                thead[
                    tr[
                        th["Name"],
                        th["Posts"],
                        th["Joined"],
                    ]
                ],
                tbody[
                    [
                        tr[
                            td[a(href=f"/authors/{author.id}")[author.name]],
                            td[str(author.post_count)],
                            td[render_time(author.created_at)],
                        ]
                        for author in authors
                    ]
                ],
            ]
        ],
        render_pagination(path="/authors", total=total, page=page, limit=limit),
    ]

    return render_page(title_text="Authors", content=content)
