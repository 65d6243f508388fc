"""
Blog - Flask Application
Index of articles + single article pages rendered from blog/{name}/.
"""
import logging

from flask import Flask

from config import CONTENT_DIR, DEBUG, HOST, INCLUDE_HIDDEN, PORT, STATIC_DIR, TEMPLATE_DIR
from modules.content import ContentRepository
from modules.errors import ContentError, NotFound, TemplateError
from modules.markdown_render import to_html
from modules.renderer import PageRenderer

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
)
logger = logging.getLogger("blog")

NOT_FOUND_BODY = "<p>Could not find post, sorry!</p>"
TEMPLATE_FAILURE_BODY = "<p>I'm struggling with the templates 💩</p>"
SERVER_ERROR_BODY = "<p>Something went wrong, sorry!</p>"


def create_app(content_dir=None, template_dir=None, static_dir=None, include_hidden=None):
    """Build the app. Raises FatalStartupError if the templates don't compile."""
    renderer = PageRenderer(template_dir or TEMPLATE_DIR)
    repository = ContentRepository(
        content_dir or CONTENT_DIR,
        include_hidden=INCLUDE_HIDDEN if include_hidden is None else include_hidden,
    )

    app = Flask(__name__, static_folder=static_dir or STATIC_DIR, static_url_path="/static")
    app.extensions["blog"] = {"renderer": renderer, "repository": repository}

    # ═══════════════════════════════════════════════════════════════
    #  Index
    # ═══════════════════════════════════════════════════════════════

    @app.route("/")
    def index():
        # query string is accepted and ignored
        try:
            articles = repository.list_articles()
            page = renderer.render("index.html", articles=articles)
        except (ContentError, OSError) as e:
            logger.error(f"Index error: {e}")
            return SERVER_ERROR_BODY, 500
        except Exception as e:
            logger.exception(f"Unexpected index error: {e}")
            return SERVER_ERROR_BODY, 500
        return page, 200

    # ═══════════════════════════════════════════════════════════════
    #  Article
    # ═══════════════════════════════════════════════════════════════

    @app.route("/blog/<article_name>")
    def blog_article(article_name):
        try:
            article = repository.fetch_article(article_name)
        except NotFound as e:
            logger.info(f"Article [{article_name}] not found: {e}")
            return NOT_FOUND_BODY, 404

        try:
            page = renderer.render(
                "blog_article.html",
                article=article.metadata,
                markdown_content=article.body,
                content_html=to_html(article.body),
            )
        except TemplateError as e:
            logger.error(f"Article [{article_name}] template error: {e}")
            return TEMPLATE_FAILURE_BODY, 404
        return page, 200

    logger.info(f"Serving articles from {repository.content_dir}")
    return app


app = create_app()


if __name__ == "__main__":
    app.run(host=HOST, port=PORT, debug=DEBUG)
