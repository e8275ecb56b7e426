import pytest
from fastapi.testclient import TestClient

from mcqgen.core.generator import MCQGenerator
from mcqgen.core.storage import JsonFileStore
from mcqgen.main import create_app


@pytest.fixture
def output_path(tmp_path):
    return tmp_path / "mcqs.json"


@pytest.fixture
def make_client(output_path):
    def _make(llm, validation="trust", store=None):
        generator = MCQGenerator(llm, store or JsonFileStore(str(output_path)), validation=validation)
        return TestClient(create_app(generator=generator))
    return _make


@pytest.fixture
def valid_request():
    return {"mcqs": 2, "tag": "basics", "technology": "Go", "mcqPrompt": "goroutines", "level": "easy"}
