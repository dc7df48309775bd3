"""
Cipher Session

One interactive run: banner, prompts, transform, result. A pre-built
CipherRequest skips the prompts, which is how command-line flags are served.
"""

from typing import Optional

# Extract layer imports
from caesar.extract.prompts import (
    InputFn,
    InputReadError,
    OutputFn,
    prompt_direction,
    prompt_phrase,
    prompt_shift,
)

# Transform layer imports
from caesar.transformation.schemas import CipherRequest, CipherResult
from caesar.transformation.transformers import transform

# Load layer imports
from caesar.load.display import show_banner, show_result

from caesar.coreutils.logging import log_function_call
import logging

logger = logging.getLogger(__name__)


def collect_request(
    input_fn: InputFn = input, output_fn: OutputFn = print
) -> CipherRequest:
    """Run the three prompts in order"""
    phrase = prompt_phrase(input_fn)
    shift = prompt_shift(input_fn, output_fn)
    direction = prompt_direction(input_fn)
    return CipherRequest(phrase=phrase, shift=shift, direction=direction)


def run_request(request: CipherRequest) -> CipherResult:
    """
    Apply the cipher to a request

    Args:
        request: Phrase, shift and direction

    Returns:
        CipherResult: Original and processed phrase
    """
    log_function_call(
        "run_request", shift=request.shift, direction=request.direction.name
    )

    processed = transform(request.phrase, request.shift, request.direction)

    logger.info(
        f"{request.direction.name.capitalize()}ed {len(request.phrase)} chars with shift {request.shift}"
    )
    return CipherResult(
        original=request.phrase,
        processed=processed,
        shift=request.shift,
        direction=request.direction,
    )


def run_session(
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
    request: Optional[CipherRequest] = None,
) -> CipherResult:
    """
    Run one complete cipher session

    Args:
        input_fn: Function used to read prompt answers
        output_fn: Function used to write to the terminal
        request: If given, used as-is and no prompts are shown

    Returns:
        CipherResult: What was shown to the user
    """
    try:
        show_banner(output_fn)

        if request is None:
            request = collect_request(input_fn, output_fn)

        result = run_request(request)
        show_result(result, output_fn)
        return result

    except InputReadError:
        raise
    except Exception as e:
        logger.error(f"❌ Cipher session failed: {e}")
        raise
