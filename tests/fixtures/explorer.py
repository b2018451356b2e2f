"""Fixtures for the explorer core."""

import pytest

from models.action import ExplorerAction
from models.action_catalog import ExplorerActionName
from models.explorer_state import ExplorerState


def create_action(name: ExplorerActionName | str, value: str = "") -> ExplorerAction:
    """Create an ExplorerAction from a catalog name or a raw string.

    Args:
        name: Catalog member or raw action name.
        value: Action payload.

    Returns:
        ExplorerAction instance ready for testing.
    """
    if isinstance(name, ExplorerActionName):
        name = name.value
    return ExplorerAction(name=name, value=value)


def create_explorer_state(
    actions: list[ExplorerAction] | None = None,
    strict: bool = True,
    verbose: bool = False,
    **kwargs,
) -> ExplorerState:
    """Create an ExplorerState with sensible defaults.

    Args:
        actions: Actions to replay right after construction.
        strict: Raise on missing or directory lookups (default: True).
        verbose: Log every action at INFO.
        **kwargs: Additional fields to override.

    Returns:
        ExplorerState instance ready for testing.
    """
    return ExplorerState(actions=actions, strict=strict, verbose=verbose, **kwargs)


# Pre-built action sequences

SORTING_SCENARIO_ACTIONS = [
    create_action(ExplorerActionName.CREATE_FOLDER, "src"),
    create_action(ExplorerActionName.CREATE_FILE, "src/zebra.ts"),
    create_action(ExplorerActionName.CREATE_FILE, "src/alpha.ts"),
    create_action(ExplorerActionName.CREATE_FOLDER, "src/beta"),
]

PROJECT_ACTIONS = [
    create_action(ExplorerActionName.CREATE_FOLDER, "src"),
    create_action(ExplorerActionName.CREATE_FILE, "src/index.ts"),
    create_action(ExplorerActionName.CREATE_FILE, "src/utils/format.ts"),
    create_action(ExplorerActionName.CREATE_FILE, "README.md"),
    create_action(ExplorerActionName.SET_FILE_CONTENTS, "src/index.ts;export {};"),
]


@pytest.fixture
def empty_explorer():
    """Provide a fresh, strict ExplorerState with nothing in it."""
    return create_explorer_state()


@pytest.fixture
def project_explorer():
    """Provide a strict ExplorerState holding a small project.

    Tree::

        README.md
        src/
            index.ts      (content "export {};")
            utils/
                format.ts
    """
    return create_explorer_state(actions=PROJECT_ACTIONS)


@pytest.fixture
def lenient_explorer():
    """Provide a lenient ExplorerState holding the same small project."""
    return create_explorer_state(actions=PROJECT_ACTIONS, strict=False)
