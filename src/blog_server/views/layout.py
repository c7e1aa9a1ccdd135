from htpy import Node, a, body, div, h1, head, header, html, link, main, meta, nav, title


def render_page(*, title_text: str, content: Node) -> Node:
    return html(lang="en")[
        head[
            meta(charset="utf-8"),
            title[title_text],
            meta(name="viewport", content="width=device-width, initial-scale=1"),
            meta(name="color-scheme", content="light dark"),
            link(rel="stylesheet", href="/static/app.css"),
        ],
        body[
            header(class_="site-header")[
                h1[a(href="/")["Blog"]],
                nav(class_="site-nav")[
                    a(href="/posts")["Posts"],
                    a(href="/authors")["Authors"],
                ],
            ],
            div(class_="app-layout")[main(class_="main-content")[content],],
        ],
    ]
