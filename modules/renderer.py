"""
PageRenderer — compiles the template set once and renders pages from it.
"""
import logging
import os

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError as JinjaTemplateError,
    TemplateNotFound,
    TemplateSyntaxError,
    select_autoescape,
)

from modules.errors import FatalStartupError, TemplateError
from modules.markdown_render import markdown_filter

logger = logging.getLogger("renderer")


class PageRenderer:
    """Read-only after construction; safe to share across request threads."""

    def __init__(self, template_dir="templates", extensions=("html",)):
        self.template_dir = template_dir
        if not os.path.isdir(template_dir):
            raise FatalStartupError("Template folder not found", template_dir)

        self.env = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=select_autoescape(["html", "xml"]),
            undefined=StrictUndefined,
            auto_reload=False,
            cache_size=-1,
        )
        self.env.filters["markdown"] = markdown_filter

        self.template_names = tuple(self.env.list_templates(extensions=list(extensions)))
        if not self.template_names:
            raise FatalStartupError("No templates to load", template_dir)

        for name in self.template_names:
            try:
                self.env.get_template(name)
            except TemplateSyntaxError as e:
                raise FatalStartupError(
                    f"Couldn't compile template {name}: {e.message} (line {e.lineno})",
                    template_dir,
                ) from e

        logger.info(f"Compiled {len(self.template_names)} templates from {template_dir}")

    def render(self, name: str, **context) -> str:
        if name not in self.template_names:
            raise TemplateError(f"Template not found: {name}")
        try:
            template = self.env.get_template(name)
            return template.render(**context)
        except TemplateNotFound as e:
            raise TemplateError(f"Template not found: {e.name}") from e
        except JinjaTemplateError as e:
            raise TemplateError(f"Template {name} failed: {e}") from e
        except Exception as e:
            # runtime errors raised from template expressions
            raise TemplateError(f"Template {name} failed: {e!r}") from e
