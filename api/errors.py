"""Translation of generation-core errors into HTTP errors."""

from fastapi import HTTPException

from engine.errors import (
    DepthExceededError,
    GenerationFailedError,
    GeneratorError,
    InvalidInputError,
    NotFoundError,
)

STATUS_CODES = {
    NotFoundError: 404,
    InvalidInputError: 400,
    DepthExceededError: 422,
    GenerationFailedError: 500,
}


def http_error(error: GeneratorError) -> HTTPException:
    """HTTPException carrying the error's message and mapped status code."""
    status = STATUS_CODES.get(type(error), 500)
    return HTTPException(status_code=status, detail=str(error))
