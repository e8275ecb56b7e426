# mcqgen/core/llm_client.py
import os
import json
import time
import asyncio
import logging
from typing import Any, Dict, List, Optional

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import BaseMessage
from langchain_core.prompts import ChatPromptTemplate
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_ollama import ChatOllama

from mcqgen import config
from mcqgen.core.errors import UpstreamError

logger = logging.getLogger(__name__)

PROVIDERS = ("ollama", "gemini")


# -------------------------
# LLM init
# -------------------------
def get_llm(provider: str = config.PROVIDER,
            model: str = config.MODEL_NAME,
            base_url: str = config.MODEL_BASE_URL,
            temperature: Optional[float] = config.TEMPERATURE) -> BaseChatModel:
    """
    Build the chat model client. Called once at startup; the instance is
    shared by every request.
    """
    if provider == "ollama":
        kwargs: Dict[str, Any] = {"base_url": base_url, "model": model}
        if temperature is not None:
            kwargs["temperature"] = temperature
        return ChatOllama(**kwargs)

    if provider == "gemini":
        api_key = os.getenv("GOOGLE_API_KEY_GEMINI")
        if not api_key:
            raise RuntimeError("Please set GOOGLE_API_KEY_GEMINI environment variable for Gemini access.")
        return ChatGoogleGenerativeAI(
            model=model,
            google_api_key=api_key,
            temperature=0.5 if temperature is None else temperature,
        )

    raise ValueError(f"Unknown MCQ_PROVIDER {provider!r}; expected one of {', '.join(PROVIDERS)}")


def save_debug_log(prefix: str, payload: Dict[str, Any], log_dir: str = config.LOG_DIR):
    fname = f"{int(time.time())}_{prefix}.json"
    try:
        os.makedirs(log_dir, exist_ok=True)
        with open(os.path.join(log_dir, fname), "w", encoding="utf-8") as fh:
            json.dump(payload, fh, indent=2, ensure_ascii=False, default=str)
    except OSError:
        logger.exception("Failed to write debug log")


# -------------------------
# Model call
# -------------------------
async def call_model(prompt: ChatPromptTemplate,
                     llm,
                     inputs: Dict[str, Any],
                     max_retries: int = 0,
                     timeout: Optional[float] = None,
                     debug: bool = False) -> BaseMessage:
    """
    Run `prompt | llm` once, plus up to `max_retries` retries with linear backoff.
    `timeout` bounds each attempt; None waits indefinitely.
    Returns the raw chat message; parsing is the caller's job.
    Raises UpstreamError once every attempt has failed.
    """
    chain = prompt | llm
    total_attempts = 1 + max(0, max_retries)
    attempts_info: List[Dict[str, Any]] = []
    last_exc: Optional[BaseException] = None

    for attempt in range(1, total_attempts + 1):
        start_ts = time.time()
        try:
            message = await asyncio.wait_for(chain.ainvoke(inputs), timeout=timeout)
            duration = time.time() - start_ts
            logger.debug("LLM attempt %d succeeded in %.2fs", attempt, duration)
            if debug:
                save_debug_log(f"llm_attempt_{attempt}", {
                    "prompt": prompt.format(**inputs),
                    "raw_result": getattr(message, "content", str(message)),
                    "duration_s": duration,
                })
            return message
        except Exception as e:
            last_exc = e
            duration = time.time() - start_ts
            attempts_info.append({"attempt": attempt, "duration_s": duration, "error": repr(e)})
            logger.warning("LLM attempt %d/%d failed: %r", attempt, total_attempts, e)
            if attempt < total_attempts:
                await asyncio.sleep(1 * attempt)

    if debug:
        save_debug_log("llm_error", {"inputs": inputs, "attempts": attempts_info})
    raise UpstreamError(
        f"LLM call failed after {total_attempts} attempt(s). Last error: {last_exc!r}"
    ) from last_exc
