"""Specific error types for query construction."""

from .base import ApplicationError, ErrorCode, ErrorLevel, QueryErrorDetails


class QueryBuildError(ApplicationError, ValueError):
    """A builder could not render its accumulated state."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INVALID_INPUT,
        details: QueryErrorDetails | None = None,
    ):
        super().__init__(
            message=message,
            code=code,
            level=ErrorLevel.WARNING,
            details=details
            or QueryErrorDetails(source="query_builder", operation="build", builder="unknown"),
        )


class MissingTargetError(QueryBuildError):
    """SELECT was built without a FROM target."""

    def __init__(self, message: str = "The FROM clause is required.", details: QueryErrorDetails | None = None):
        super().__init__(
            message=message,
            code=ErrorCode.QUERY_MISSING_TARGET,
            details=details
            or QueryErrorDetails(
                source="query_builder",
                operation="build",
                builder="QueryBuilder",
                clause="FROM",
            ),
        )


class MissingReturnError(QueryBuildError):
    """A script was built without a RETURN object."""

    def __init__(self, message: str = "A return object is required.", details: QueryErrorDetails | None = None):
        super().__init__(
            message=message,
            code=ErrorCode.QUERY_MISSING_RETURN,
            details=details
            or QueryErrorDetails(
                source="query_builder",
                operation="build",
                builder="ScriptBuilder",
                clause="RETURN",
            ),
        )
