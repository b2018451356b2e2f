"""Explorer mutation endpoints.

These endpoints change the shared explorer: applying action batches,
resetting it, and restoring it from a snapshot.
"""

from fastapi import APIRouter

from api.dependencies import ExplorerSessionDep
from api.models import ApplyActionsRequest, ApplyActionsResponse, HistoryResponse
from models.explorer_state import ExplorerSnapshot, ExplorerState

router = APIRouter(
    prefix="/explorer",
    tags=["explorer"],
)


@router.post("/actions", response_model=ApplyActionsResponse)
async def apply_actions(request: ApplyActionsRequest, session: ExplorerSessionDep):
    """Apply a batch of actions in order.

    The batch is not transactional: if an action raises (an open-file in
    strict mode), the actions before it stay applied and the error is
    returned.

    Args:
        request: The actions to apply.
        session: The shared explorer session.

    Returns:
        ApplyActionsResponse: Number applied and the new history length.
    """
    with session.lock:
        session.explorer.apply_actions(request.actions)
        history_length = len(session.explorer.get_actions_applied())

    return ApplyActionsResponse(
        applied=len(request.actions),
        history_length=history_length,
    )


@router.get("/history", response_model=HistoryResponse)
async def get_history(session: ExplorerSessionDep):
    """Get every action applied so far, in order."""
    with session.lock:
        actions = list(session.explorer.get_actions_applied())

    return HistoryResponse(actions=actions, count=len(actions))


@router.post("/reset", response_model=HistoryResponse)
async def reset_explorer(session: ExplorerSessionDep):
    """Clear the tree, UI state, open files and history.

    Returns:
        HistoryResponse: The (now empty) history.
    """
    with session.lock:
        session.explorer.clear()

    return HistoryResponse(actions=[], count=0)


@router.post("/restore", response_model=ExplorerSnapshot)
async def restore_snapshot(snapshot: ExplorerSnapshot, session: ExplorerSessionDep):
    """Replace the shared explorer with one restored from a snapshot.

    Strictness and verbosity of the current explorer are kept.

    Args:
        snapshot: A snapshot previously returned by GET /explorer/snapshot.
        session: The shared explorer session.

    Returns:
        ExplorerSnapshot: The restored state.
    """
    with session.lock:
        current = session.explorer
        session.explorer = ExplorerState.from_snapshot(
            snapshot,
            strict=current.strict,
            verbose=current.verbose,
            is_repeatable=current.is_repeatable,
        )
        return session.explorer.get_snapshot()
