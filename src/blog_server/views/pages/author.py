from htpy import Node, a, div, h2, h3, li, p, section, ul

from blog_server.schemas.authors import AuthorResponse
from blog_server.views.components.time import render_time
from blog_server.views.layout import render_page


def render_author(*, author: AuthorResponse) -> Node:
    content = section(class_="author")[
        h2[author.name],
        p(class_="metadata")[author.email] if author.email else None,
        p(class_="bio")[author.bio] if author.bio else None,
        h3["Posts"],
        ul(class_="author-posts")[
            [
                li[
                    a(href=f"/posts/{post.id}")[post.title],
                    " ",
                    render_time(post.created_at),
                ]
                for post in author.posts
            ]
        ]
        if author.posts
        else p(class_="empty")["No posts yet."],
        div[a(href="/authors", class_="back-link")["← All authors"]],
    ]

    return render_page(title_text=author.name, content=content)
