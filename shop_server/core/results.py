# shop_server/core/results.py

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union
from fastapi import HTTPException, status


T = TypeVar("T")


class FailureKind(Enum):
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    CONFLICT = "conflict"
    INVALID_CREDENTIALS = "invalid_credentials"
    PERSISTENCE = "persistence"


STATUS_CODES = {
    FailureKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    FailureKind.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    FailureKind.CONFLICT: status.HTTP_409_CONFLICT,
    FailureKind.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    FailureKind.PERSISTENCE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    message: str


Result = Union[Ok[T], Failure]


def unwrap(result: Result[T]) -> T:
    """
    Returns the payload of a successful result.
    A failure is raised as an HTTPException whose status matches its kind
    and whose detail is the failure message.
    """
    if isinstance(result, Failure):
        raise HTTPException(status_code=STATUS_CODES[result.kind], detail=result.message)
    return result.value
