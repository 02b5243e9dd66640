import jinja2
from fastapi.templating import Jinja2Templates

from core.config import TEMPLATE_DIR


def create_templates(directory=TEMPLATE_DIR) -> Jinja2Templates:
    """Templates that fail on a missing context key instead of rendering blanks"""
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(directory)),
        autoescape=True,
        undefined=jinja2.StrictUndefined,
    )
    return Jinja2Templates(env=env)


templates = create_templates()
