class ReporterError(Exception):
    pass


class PreconditionError(ReporterError):
    pass


class ArtifactNotFoundError(ReporterError):
    def __init__(self, name: str):
        super().__init__(f"Artifact '{name}' not found")
        self.name: str = name


class NoPullRequestError(ReporterError):
    def __init__(self):
        super().__init__("No pull requests associated with the workflow_run")


class InvalidOptionError(ReporterError):
    def __init__(self, value: str, option: str = "report-on"):
        super().__init__(f'Option "{option}" has an invalid value: "{value}"')
        self.value: str = value
        self.option: str = option


class TemplateError(ReporterError):
    pass


class TransportError(ReporterError):
    pass
