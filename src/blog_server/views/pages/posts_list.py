from htpy import Node, a, article, div, h2, p, span

from blog_server.schemas.posts import PostListItem
from blog_server.views.components.pagination import render_pagination
from blog_server.views.components.time import render_time
from blog_server.views.layout import render_page


def render_posts_list(*, posts: list[PostListItem], total: int, page: int, limit: int) -> Node:
    items: list[Node] = [
        article(class_="post-summary")[
            h2[a(href=f"/posts/{post.id}")[post.title]],
            div(class_="metadata")[
                span["by "],
                a(href=f"/authors/{post.author.id}")[post.author.name],
                span[" · "],
                render_time(post.created_at),
            ],
            p(class_="excerpt")[post.excerpt],
        ]
        for post in posts
    ]

    content = div(class_="posts-list-page")[
        div(class_="list-header")[p[span[str(total)], " posts total"]],
        items or p(class_="empty")["No posts yet."],
        render_pagination(path="/posts", total=total, page=page, limit=limit),
    ]

    return render_page(title_text="Posts", content=content)
