"""
CVR Core Registry — Errors
=============================
Raised only when registry state itself is corrupt.
Ordinary request failures are RejectionReasons, never exceptions.
"""


class RegistryInvariantError(Exception):
    """
    Raised when a registry snapshot violates a data-model law.

    No auto-repair. The caller must stop using the state.
    """

    def __init__(self, invariant: str, detail: str):
        self.invariant = invariant
        self.detail = detail
        super().__init__(
            f"CVR REGISTRY INVARIANT VIOLATED — {invariant}: {detail}"
        )
