"""Row Verification — pluggable accept/reject check applied to every loaded row.

Invariants:
    - A verifier is PURE: it inspects one Munro and returns a RowVerdict
    - A rejected verdict always carries a human-readable reason
    - Verifiers never decide the rejection policy; the loader does (skip or abort)

Design Decisions:
    - Protocol over ABC: any callable with the right signature is a verifier
    - Default verifier rejects the blank trailer rows the published table ships with
"""

from dataclasses import dataclass
from typing import Protocol

from munro_api.core.munro import Munro


@dataclass(frozen=True)
class RowVerdict:
    """Outcome of verifying one row."""
    accepted: bool
    reason: str | None = None

    @classmethod
    def accept(cls) -> "RowVerdict":
        return cls(accepted=True)

    @classmethod
    def reject(cls, reason: str) -> "RowVerdict":
        return cls(accepted=False, reason=reason)


class RowVerifier(Protocol):
    """Contract for per-row verification — injected into the loader."""
    def __call__(self, munro: Munro) -> RowVerdict: ...


def verify_munro_row(munro: Munro) -> RowVerdict:
    """Default verifier: a row needs a positive running number and a name."""
    if munro.running_number <= 0:
        return RowVerdict.reject(
            f"running number must be positive, got {munro.running_number}",
        )
    if not munro.name.strip():
        return RowVerdict.reject("name is empty")
    return RowVerdict.accept()


def accept_all_rows(munro: Munro) -> RowVerdict:
    """Verifier that accepts every parsed row."""
    return RowVerdict.accept()
