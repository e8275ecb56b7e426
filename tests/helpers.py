import json

from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.messages import AIMessage
from langchain_core.runnables import RunnableLambda


def mcq(question, correct_index=0, n_options=4):
    return {
        "question": question,
        "options": [{"text": chr(ord("A") + i), "correct": i == correct_index} for i in range(n_options)],
    }


def fake_llm(*payloads):
    """Chat model stub replying with each payload in turn (dicts are JSON-encoded)."""
    responses = [p if isinstance(p, str) else json.dumps(p) for p in payloads]
    return FakeListChatModel(responses=responses)


class RecordingLLM:
    """Wraps a reply in a runnable that remembers every prompt it was sent."""

    def __init__(self, reply):
        self.reply = reply if isinstance(reply, str) else json.dumps(reply)
        self.prompts = []
        self.runnable = RunnableLambda(self._call)

    def _call(self, prompt_value):
        self.prompts.append(prompt_value.to_messages()[0].content)
        return AIMessage(content=self.reply)


def failing_llm(exc=None):
    def _boom(_):
        raise exc or ConnectionError("model host unreachable")
    return RunnableLambda(_boom)
