from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from fastapi import HTTPException

from stitchstyle.application import RecordNotFoundError
from stitchstyle.core.validation import ValidationError
from stitchstyle.domain import IncompleteWorkflowError, InconsistentStateError, InvalidIndexError
from stitchstyle.infrastructure import StylistError


@contextmanager
def http_errors() -> Iterator[None]:
    """Translate domain and service errors into HTTP responses."""

    try:
        yield
    except RecordNotFoundError as exc:
        raise HTTPException(status_code=404, detail=str(exc)) from exc
    except (InvalidIndexError, ValidationError, ValueError, IndexError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except (InconsistentStateError, IncompleteWorkflowError) as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    except StylistError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc
