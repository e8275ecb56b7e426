# mcqgen/core/generator.py
import logging
from typing import Any, Dict, List, Optional

from langchain_core.exceptions import OutputParserException
from langchain_core.output_parsers import JsonOutputParser
from pydantic import ValidationError

from mcqgen import config
from mcqgen.core.errors import CountShortfallError, ParseError
from mcqgen.core.llm_client import call_model, get_llm, save_debug_log
from mcqgen.core.prompts import build_mcq_prompt
from mcqgen.core.storage import JsonFileStore
from mcqgen.models import MCQ, MCQList, GenerationRequest, GenerationResult, format_count

logger = logging.getLogger(__name__)

VALIDATION_MODES = ("trust", "strict")
OPTIONS_PER_QUESTION = 4


class MCQGenerator:
    """
    One generation per call: build prompt -> call model -> parse -> persist.

    The chat model and the store are created once and shared across requests.
    validation="trust" returns whatever list the model put under "mcqs";
    validation="strict" trims surplus questions, rejects a shortfall and
    checks every question it keeps.
    """

    def __init__(self,
                 llm,
                 store: JsonFileStore,
                 validation: str = "trust",
                 max_retries: int = 0,
                 timeout: Optional[float] = None,
                 debug: bool = False):
        if validation not in VALIDATION_MODES:
            raise ValueError(f"Unknown MCQ_VALIDATION {validation!r}; expected one of {', '.join(VALIDATION_MODES)}")
        self.llm = llm
        self.store = store
        self.validation = validation
        self.max_retries = max_retries
        self.timeout = timeout
        self.debug = debug
        self.parser = JsonOutputParser(pydantic_object=MCQList)

    @property
    def strict(self) -> bool:
        return self.validation == "strict"

    async def generate(self, request: GenerationRequest) -> Dict[str, Any]:
        inputs = request.model_dump()
        inputs["mcqs"] = format_count(request.mcqs)
        prompt = build_mcq_prompt(request.mcqs)

        message = await call_model(prompt, self.llm, inputs,
                                   max_retries=self.max_retries,
                                   timeout=self.timeout,
                                   debug=self.debug)

        mcqs = self.parse(message)
        if self.strict:
            mcqs = self.check_questions(mcqs, request.mcqs)

        result = GenerationResult(
            mcqs=mcqs,
            tag=request.tag,
            technology=request.technology,
            mcqPrompt=request.mcqPrompt,
            level=request.level,
        ).payload()

        self.store.save(result)
        return result

    def parse(self, message) -> List[Any]:
        """
        Decode the model reply and return the list under "mcqs".
        Markdown code fences around the JSON are tolerated.
        """
        try:
            parsed = self.parser.invoke(message)
        except (OutputParserException, ValueError) as e:
            if self.debug:
                save_debug_log("mcq_parse_error", {"raw": getattr(message, "content", str(message)), "error": repr(e)})
            raise ParseError(f"model output is not valid JSON: {e}") from e

        if not isinstance(parsed, dict) or not isinstance(parsed.get("mcqs"), list):
            raise ParseError(f"model output has no 'mcqs' array: {str(parsed)[:500]}")
        return parsed["mcqs"]

    def check_questions(self, mcqs: List[Any], requested) -> List[Any]:
        """
        Trim surplus questions, reject a shortfall, then check the questions kept.
        """
        if len(mcqs) > requested:
            logger.info("Trimming %d generated questions to the %s requested", len(mcqs), format_count(requested))
            mcqs = mcqs[:int(requested)]
        if len(mcqs) < requested:
            raise CountShortfallError(len(mcqs), requested)

        for i, item in enumerate(mcqs):
            try:
                q = MCQ.model_validate(item)
            except ValidationError as e:
                raise ParseError(f"question {i} has an invalid shape: {e}") from e
            if len(q.options) != OPTIONS_PER_QUESTION:
                raise ParseError(f"question {i} has {len(q.options)} options, expected {OPTIONS_PER_QUESTION}")
            correct = sum(1 for o in q.options if o.correct)
            if correct != 1:
                raise ParseError(f"question {i} has {correct} correct options, expected 1")
        return mcqs


def build_generator(llm=None) -> MCQGenerator:
    """
    Generator wired from config. `llm` overrides the configured provider.
    """
    if llm is None:
        llm = get_llm()
    return MCQGenerator(
        llm,
        JsonFileStore(config.OUTPUT_PATH),
        validation=config.VALIDATION,
        max_retries=config.LLM_RETRIES,
        timeout=config.LLM_TIMEOUT,
        debug=config.DEBUG,
    )
