from htpy import Node, a, article, div, h2, p, span

from blog_server.schemas.posts import PostResponse
from blog_server.views.components.time import render_time
from blog_server.views.layout import render_page


def render_post(*, post: PostResponse) -> Node:
    paragraphs = [p[chunk] for chunk in post.body.split("\n\n") if chunk.strip()]

    content = article(class_="post")[
        h2[post.title],
        div(class_="metadata")[
            span["by "],
            a(href=f"/authors/{post.author.id}")[post.author.name],
            span[" · "],
            render_time(post.created_at),
        ],
        div(class_="post-body")[paragraphs],
        a(href="/posts", class_="back-link")["← All posts"],
    ]

    return render_page(title_text=post.title, content=content)
