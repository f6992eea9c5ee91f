from typing import Any, Dict, List


class RosterError(Exception):
    """Base class for roster domain failures."""


class ValidationError(RosterError):
    """Malformed create/update payload. Nothing was written."""

    def __init__(self, errors: List[Dict[str, str]]):
        self.errors = errors
        fields = ", ".join(e["field"] for e in errors)
        super().__init__(f"Invalid fields: {fields}")


class NotFound(RosterError):
    def __init__(self, entity: str, entity_id: Any):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found: {entity_id}")


class IntegrityViolation(RosterError):
    """Duplicate association, or an attendance write for a pair that is not enrolled."""


class PartialBulkFailure(RosterError):
    """Some pairs of a bulk attendance update failed.

    Pairs listed in ``applied`` are already committed and stay that way.
    """

    def __init__(self, applied: List[Dict[str, str]], failures: List[Dict[str, str]]):
        self.applied = applied
        self.failures = failures
        super().__init__(f"{len(failures)} of {len(applied) + len(failures)} attendance updates failed")
