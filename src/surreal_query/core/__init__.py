from .base import ApplicationError, ErrorCode, ErrorLevel, QueryErrorDetails
from .errors import MissingReturnError, MissingTargetError, QueryBuildError
