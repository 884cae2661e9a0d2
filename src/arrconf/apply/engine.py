"""Reconcile declared resources against the remote server and the local state."""

from concurrent.futures import ThreadPoolExecutor, as_completed
from enum import Enum
from typing import Dict, List, Optional, Tuple
from pydantic import BaseModel, Field
from ..client.api import ArrClient
from ..config.manager import DEFAULT_PARALLELISM
from ..lifecycle import BaseLifecycle, Deadline, LifecycleState, lifecycle_for
from ..utils.errors import ApplyError, ArrconfError, NotFoundError
from ..utils.logging import get_logger
from .declarations import Declaration
from .state import State, StateEntry

logger = get_logger("apply.engine")


class Action(str, Enum):
    """What reconciling one address does."""
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"
    REPLACE = "replace"
    NO_OP = "no-op"


_APPLIED_STATES = {
    Action.CREATE: LifecycleState.CREATED,
    Action.REPLACE: LifecycleState.CREATED,
    Action.UPDATE: LifecycleState.UPDATED,
    Action.DELETE: LifecycleState.DELETED,
    Action.NO_OP: LifecycleState.SYNCED,
}


class Change(BaseModel):
    """Planned or applied change of one address."""
    address: str
    kind: str
    action: Action
    id: Optional[int] = None
    changed: List[str] = Field(default_factory=list, description="Attributes that differ")
    state: LifecycleState = LifecycleState.PLANNED


class ApplyReport(BaseModel):
    """Outcome of one reconciliation run."""
    changes: List[Change] = Field(default_factory=list)
    state: State = Field(default_factory=State)
    failures: Dict[str, Exception] = Field(default_factory=dict)

    class Config:
        arbitrary_types_allowed = True

    @property
    def has_changes(self) -> bool:
        return any(change.action != Action.NO_OP for change in self.changes)

    def counts(self) -> Dict[str, int]:
        counts = {action.value: 0 for action in Action}
        for change in self.changes:
            counts[change.action.value] += 1
        return counts

    def raise_for_failures(self) -> None:
        if self.failures:
            raise ApplyError(self.failures)


class Reconciler:
    """
    Plans and applies declarations, one worker per resource instance.

    Instances are independent: each address is handled by exactly one
    worker, so no resource is ever mutated by two calls at once. A failing
    address does not stop the others; its prior state entry is kept.
    """

    def __init__(self, client: Optional[ArrClient], parallelism: int = DEFAULT_PARALLELISM,
                 deadline: Optional[Deadline] = None):
        self.client = client
        self.parallelism = max(1, parallelism)
        self.deadline = deadline

    def run(self, declarations: Dict[str, Declaration], state: State, dry_run: bool = False) -> ApplyReport:
        """
        Reconcile every address found in the declarations or the state.

        Declarations are validated before any remote call; if one is
        invalid nothing is sent and ApplyError is raised.

        Args:
            declarations: Desired resources by address
            state: Previously applied resources by address
            dry_run: Plan only; no create, update or delete is sent

        Returns:
            ApplyReport with one change per address, the new state and per-address failures
        """
        desired = self._declare_all(declarations)
        addresses = sorted(set(desired) | set(state.resources))
        report = ApplyReport(state=State(resources=dict(state.resources)))

        with ThreadPoolExecutor(max_workers=self.parallelism) as pool:
            futures = {
                pool.submit(self._reconcile, address, desired.get(address), state.resources.get(address), dry_run):
                    address
                for address in addresses
            }
            for future in as_completed(futures):
                address = futures[future]
                try:
                    change, entry = future.result()
                except ArrconfError as e:
                    logger.error(f"{address}: {e}")
                    report.failures[address] = e
                    continue
                report.changes.append(change)
                if change.action == Action.NO_OP:
                    change.state = LifecycleState.SYNCED
                if dry_run:
                    continue
                change.state = _APPLIED_STATES[change.action]
                if entry is None:
                    report.state.resources.pop(address, None)
                else:
                    report.state.resources[address] = entry

        report.changes.sort(key=lambda change: change.address)
        counts = report.counts()
        logger.info(
            f"{'Plan' if dry_run else 'Apply'}: {counts['create']} to create, {counts['update']} to update, "
            f"{counts['replace']} to replace, {counts['delete']} to delete, {len(report.failures)} failed"
        )
        return report

    def _declare_all(self, declarations: Dict[str, Declaration]) -> Dict[str, Tuple[BaseLifecycle, BaseModel]]:
        desired: Dict[str, Tuple[BaseLifecycle, BaseModel]] = {}
        invalid: Dict[str, Exception] = {}
        for address, declaration in declarations.items():
            try:
                lifecycle = lifecycle_for(declaration.kind, self.client)
                desired[address] = (lifecycle, lifecycle.declare(declaration.attributes))
            except ArrconfError as e:
                invalid[address] = e
        if invalid:
            raise ApplyError(invalid)
        return desired

    def _reconcile(self, address: str, desired: Optional[Tuple[BaseLifecycle, BaseModel]],
                   entry: Optional[StateEntry], dry_run: bool) -> Tuple[Change, Optional[StateEntry]]:
        if desired is None:
            prior = lifecycle_for(entry.kind, self.client)
            if not dry_run:
                prior.delete(entry.id, self.deadline)
            return Change(address=address, kind=entry.kind, action=Action.DELETE, id=entry.id), None

        lifecycle, typed = desired
        if entry is not None and entry.kind != lifecycle.kind:
            change = Change(address=address, kind=lifecycle.kind, action=Action.REPLACE)
            if dry_run:
                return change, entry
            lifecycle_for(entry.kind, self.client).delete(entry.id, self.deadline)
            created = lifecycle.create(typed, self.deadline)
            change.id = created.id
            return change, state_entry(lifecycle, created)

        if entry is not None:
            try:
                current = lifecycle.read(entry.id, self.deadline)
            except NotFoundError:
                logger.info(f"{address}: {lifecycle.kind} {entry.id} no longer exists, recreating")
            else:
                planned = lifecycle.fill_unknown(typed, current)
                changed = lifecycle.diff(planned, current)
                if not changed:
                    return Change(address=address, kind=lifecycle.kind, action=Action.NO_OP, id=current.id), \
                        state_entry(lifecycle, current)
                change = Change(address=address, kind=lifecycle.kind, action=Action.UPDATE,
                                id=current.id, changed=changed)
                if dry_run:
                    return change, entry
                updated = lifecycle.update(planned, current, self.deadline)
                return change, state_entry(lifecycle, updated)

        change = Change(address=address, kind=lifecycle.kind, action=Action.CREATE)
        if dry_run:
            return change, None
        created = lifecycle.create(typed, self.deadline)
        change.id = created.id
        return change, state_entry(lifecycle, created)


def state_entry(lifecycle: BaseLifecycle, typed: BaseModel) -> StateEntry:
    return StateEntry(
        kind=lifecycle.kind,
        id=typed.id,
        attributes=typed.model_dump(mode="json", exclude_none=True, warnings=False),
    )
