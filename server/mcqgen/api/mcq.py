# mcqgen/api/mcq.py
import math
import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Request
from pydantic import ValidationError

from mcqgen.core.errors import GenerationError
from mcqgen.core.generator import MCQGenerator
from mcqgen.models import ErrorResponse, GenerationRequest

logger = logging.getLogger(__name__)

router = APIRouter()

INVALID_INPUT_MESSAGE = (
    'Invalid input. Ensure mcqs is a number, tag, technology, and mcqPrompt are strings, '
    'and level is one of "easy", "medium", or "hard".'
)
INVALID_INPUT_MESSAGE_STRICT = (
    'Invalid input. Ensure mcqs is a positive number, tag, technology, and mcqPrompt are strings, '
    'and level is one of "easy", "medium", or "hard".'
)


def get_generator(request: Request) -> MCQGenerator:
    return request.app.state.generator


def validate_request(payload: Any, strict: bool = False) -> GenerationRequest:
    """
    Raise a 400 with the fixed message unless payload is a well-formed generation request.
    """
    message = INVALID_INPUT_MESSAGE_STRICT if strict else INVALID_INPUT_MESSAGE
    if not isinstance(payload, dict):
        logger.info("Rejected /mcq body: not a JSON object")
        raise HTTPException(status_code=400, detail=message)
    try:
        req = GenerationRequest.model_validate(payload)
    except ValidationError as e:
        logger.info("Rejected /mcq body: %s", e.errors(include_url=False))
        raise HTTPException(status_code=400, detail=message)
    if strict and not (math.isfinite(req.mcqs) and req.mcqs > 0):
        logger.info("Rejected /mcq body: mcqs=%r is not a positive number", req.mcqs)
        raise HTTPException(status_code=400, detail=message)
    return req


@router.post(
    "/mcq",
    response_model=Dict[str, Any],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_mcqs(request: Request, generator: MCQGenerator = Depends(get_generator)):
    """
    Body: {mcqs, tag, technology, mcqPrompt, level}
    Response: {mcqs: [{question, options: [{text, correct}]}], tag, technology, mcqPrompt, level},
    identical to what was written to the output file.
    """
    try:
        payload = await request.json()
    except ValueError:
        payload = None
    req = validate_request(payload, strict=generator.strict)

    try:
        return await generator.generate(req)
    except GenerationError as e:
        # cause stays server-side
        logger.exception("Error occurred (%s): %s", e.kind, e)
        raise HTTPException(status_code=500, detail=e.public_message)
