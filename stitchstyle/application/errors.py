from __future__ import annotations


class RecordNotFoundError(LookupError):
    """Raised when a customer, style, tailor or order id is unknown."""

    def __init__(self, kind: str, record_id: str) -> None:
        super().__init__(f"{kind} {record_id!r} not found")
        self.kind = kind
        self.record_id = record_id


class SessionNotFoundError(RecordNotFoundError):
    def __init__(self, session_id: str) -> None:
        super().__init__("workflow session", session_id)
