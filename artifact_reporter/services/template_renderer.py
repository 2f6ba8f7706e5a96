from jinja2 import StrictUndefined
from jinja2 import TemplateError as JinjaTemplateError
from jinja2.sandbox import SandboxedEnvironment

from artifact_reporter.errors import TemplateError
from artifact_reporter.models import RenderContext


class TemplateRenderer:
    def __init__(self):
        # templates may carry text from fork pull requests, never give them python access
        self.env: SandboxedEnvironment = SandboxedEnvironment(
            undefined=StrictUndefined,
            autoescape=False,
            keep_trailing_newline=False,
            finalize=lambda value: "" if value is None else value,
        )

    def render(self, template: str, context: RenderContext) -> str:
        try:
            compiled = self.env.from_string(template)
            return compiled.render(context.as_namespace()).strip()
        except JinjaTemplateError as e:
            raise TemplateError(f"Failed to render template {template!r}: {e}") from e
