"""
Exception classes for pwplot.

Custom exception hierarchy for better error handling and debugging.
"""

from __future__ import annotations

from typing import Any

from pydantic import (
    ValidationError,
    ValidationInfo,
    WrapValidator,
)
from pydantic_core import ErrorDetails, InitErrorDetails, PydanticCustomError


class PwplotException(Exception):
    """
    Base exception class for all pwplot-related errors.

    This serves as the root exception that all other pwplot exceptions inherit from,
    allowing users to catch all pwplot-specific errors with a single except clause.
    """


class InvalidRangeError(PwplotException, ValueError):
    """
    Exception raised when a plotting range is malformed.

    This typically occurs when:
    - The lower bound is greater than the upper bound
    - A bound is not finite
    - The range is not a pair of numbers
    """


class SamplingError(PwplotException):
    """
    Exception raised when plot data cannot be sampled.

    Raised when the sampling step is not strictly positive, since the
    sampler would never reach the end of the range.
    """


class UnknownFunctionError(PwplotException, KeyError):
    """
    Raised when a function configuration names an unregistered type.
    """


def custom_error_msg(custom_messages: dict[str, str]) -> Any:
    r"""
    Replace pydantic error messages by error type.

    Wraps validation of an annotated field and rewrites the message of every
    error whose ``type`` has an entry in ``custom_messages``. The message is a
    format string filled from the error context, the offending input and the
    data of the model validated so far.

    See https://github.com/pydantic/pydantic/discussions/8468.

    Example:

    >>> from typing import Annotated, Literal
    >>> from pydantic import BaseModel
    >>> class Config(BaseModel):
    ...     kind: Annotated[
    ...         Literal["rect", "tri"],
    ...         custom_error_msg({"literal_error": "'{input}' is not a pulse shape"}),
    ...     ]
    >>> Config(kind="sine")  # doctest: +IGNORE_EXCEPTION_DETAIL
    Traceback (most recent call last):
    ...
    pydantic_core._pydantic_core.ValidationError: 1 validation error for Config
    kind
      'sine' is not a pulse shape ...
    """

    def _rewrite(
        error: ErrorDetails, ctx: ValidationInfo
    ) -> InitErrorDetails | ErrorDetails:
        error["loc"] = error["loc"][1:]  # skip the current location
        message = custom_messages.get(error["type"])
        if not message:
            return error

        err_ctx = {**error.get("ctx", {}), "input": error["input"]}
        if ctx.data:
            err_ctx.update(ctx.data)
        return InitErrorDetails(
            type=PydanticCustomError(error["type"], message, err_ctx),
            loc=error["loc"],
            input=error["input"],
        )

    def _validator(v: Any, next_: Any, ctx: ValidationInfo) -> Any:
        try:
            return next_(v, ctx)
        except ValidationError as exc:
            raise ValidationError.from_exception_data(
                title=exc.title,
                line_errors=[_rewrite(error, ctx) for error in exc.errors()],  # type: ignore[misc]
            ) from None

    return WrapValidator(_validator)
