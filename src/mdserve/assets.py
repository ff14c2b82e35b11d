"""Bundled page template.

Locates the HTML page template shipped inside the mdserve package and
compiles it once at startup.
"""

from importlib.resources import files

from jinja2 import Environment, StrictUndefined, Template

PAGE_TEMPLATE_NAME = "page.html"


def read_page_template() -> str:
    """Return the source of the bundled page template.

    Raises:
        FileNotFoundError: If the template is not bundled.
    """
    template = files("mdserve").joinpath("templates", PAGE_TEMPLATE_NAME)
    if not template.is_file():
        msg = f"Bundled page template not found: templates/{PAGE_TEMPLATE_NAME}"
        raise FileNotFoundError(msg)
    return template.read_text(encoding="utf-8")


def compile_page_template(source: str | None = None) -> Template:
    """Compile the page template.

    Variables are autoescaped; the page body is inserted with ``|safe`` since
    converter output is trusted HTML. Undefined variables fail rendering
    instead of producing empty strings.

    Args:
        source: Template source, defaults to the bundled template

    Returns:
        Compiled template, safe to render from concurrent requests

    Raises:
        jinja2.TemplateSyntaxError: If the template cannot be parsed
    """
    env = Environment(autoescape=True, undefined=StrictUndefined)
    return env.from_string(source if source is not None else read_page_template())
