from typing import Union
from uuid import UUID

from fastapi import status
from src.libs.result import Error


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


# Business error codes and the HTTP status they surface with
CLIENT_ERROR_STATUS = {
    "INVALID_ROLE": status.HTTP_400_BAD_REQUEST,
    "INVALID_INVITEE": status.HTTP_400_BAD_REQUEST,
    "INVALID_ASSIGNEE": status.HTTP_400_BAD_REQUEST,
    "INVALID_ID": status.HTTP_400_BAD_REQUEST,
    "FORBIDDEN": status.HTTP_403_FORBIDDEN,
    "PROJECT_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "TASK_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "STATUS_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "INVITATION_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "MEMBERSHIP_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "UNKNOWN_STATUS": status.HTTP_400_BAD_REQUEST,
    "ALREADY_MEMBER": status.HTTP_409_CONFLICT,
    "DUPLICATE_INVITATION": status.HTTP_409_CONFLICT,
    "INVITATION_ALREADY_ACCEPTED": status.HTTP_409_CONFLICT,
    "INVITATION_REJECTED": status.HTTP_409_CONFLICT,
    "LAST_OWNER": status.HTTP_409_CONFLICT,
    "CANNOT_DELETE_DEFAULT": status.HTTP_409_CONFLICT,
    "CANNOT_DELETE_LAST_COLUMN": status.HTTP_409_CONFLICT,
}


def raise_for_error(error: Error):
    """Raise the ClientError or ServerError a use case error maps to"""
    status_code = CLIENT_ERROR_STATUS.get(error.code)
    if status_code is None:
        raise ServerError(error)
    raise ClientError(error, status_code=status_code)


def parse_uuid(value: Union[str, UUID], label: str) -> UUID:
    """Parse a path parameter, 400 on malformed input"""
    try:
        return UUID(str(value))
    except ValueError:
        raise ClientError(
            Error("INVALID_ID", f"Invalid {label} ID format"),
            status_code=status.HTTP_400_BAD_REQUEST,
        )
