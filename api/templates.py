"""Random text generator endpoints."""

from fastapi import APIRouter, Request

from api.errors import http_error
from engine.errors import GeneratorError
from engine.rng import RandomSource
from engine.templates import expand_template, raise_for_partial
from models.templates import ExpandOptions, ExpansionResult

router = APIRouter()


class ExpandRequest(ExpandOptions):
    """Expansion options; ``strict`` turns a partial result into an error."""
    strict: bool = False


@router.get("/generators")
def list_generators(request: Request) -> list[dict]:
    return [
        {"name": t.name, "description": t.description}
        for t in request.app.state.settings.random.generators
    ]


@router.post("/{name}", response_model=ExpansionResult)
def run_generator(name: str, request: Request, body: ExpandRequest | None = None) -> ExpansionResult:
    """Expand the named template.

    Unknown tokens and depth truncation are reported on the result. With
    ``strict`` they yield 404 and 422 respectively.
    """
    body = body or ExpandRequest()
    try:
        result = expand_template(
            name, request.app.state.settings, RandomSource(body.seed), body.max_depth
        )
        if body.strict:
            raise_for_partial(result)
    except GeneratorError as e:
        raise http_error(e)
    return result
