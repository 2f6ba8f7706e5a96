from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class ActionInput:
    name: str
    description: str = ""
    required: bool = False
    default: str | None = None

    @property
    def env_name(self) -> str:
        # the runner upper-cases input names and keeps hyphens
        return f"INPUT_{self.name.upper().replace(' ', '_')}"

    def runtime_default(self) -> str:
        # expressions such as ${{ github.token }} are only evaluated by the runner
        if self.default is None or "${{" in self.default:
            return ""
        return self.default
