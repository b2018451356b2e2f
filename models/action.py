"""Explorer action model."""

from pydantic import BaseModel, ConfigDict, Field


class ExplorerAction(BaseModel):
    """A named command applied to an ExplorerState.

    Actions are immutable value objects. The meaning of ``value`` depends on
    the action name: a path, a composite ``from:<src>;to:<dst>`` pair, a
    ``<path>;<content>`` pair, typed text, or nothing at all.

    Args:
        name: Action name, normally one of ExplorerActionName.
        value: String payload for the action.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Action name, normally one of ExplorerActionName")
    value: str = Field(default="", description="String payload for the action")

    def get_summary(self) -> str:
        """Return human-readable one-line summary of this action.

        Examples:
            - "file-explorer-create-file: src/index.ts"
            - "file-explorer-show-context-menu"

        Returns:
            Brief description of the action for logging/UI display.
        """
        if self.value:
            return f"{self.name}: {self.value}"
        return self.name
