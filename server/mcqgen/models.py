from typing import Any, Dict, List, Literal, Union

from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt, StrictStr

Level = Literal["easy", "medium", "hard"]


def format_count(mcqs) -> str:
    """Render a question count the way it was sent: 2.0 -> "2", 2.5 -> "2.5"."""
    if isinstance(mcqs, float) and mcqs.is_integer():
        return str(int(mcqs))
    return str(mcqs)


class GenerationRequest(BaseModel):
    mcqs: Union[StrictInt, StrictFloat] = Field(..., description="Number of questions requested")
    tag: StrictStr
    technology: StrictStr
    mcqPrompt: StrictStr
    level: Level


class MCQOption(BaseModel):
    text: StrictStr
    correct: StrictBool


class MCQ(BaseModel):
    question: StrictStr
    options: List[MCQOption]


class MCQList(BaseModel):
    """Shape the model is asked to return: {"mcqs": [...]}."""
    mcqs: List[MCQ] = Field(..., description="Generated multiple-choice questions")


class GenerationResult(BaseModel):
    # mcqs stays untyped: in trusting mode the model output is passed through unchecked
    mcqs: List[Any]
    tag: str
    technology: str
    mcqPrompt: str
    level: Level

    def payload(self) -> Dict[str, Any]:
        return {
            "mcqs": self.mcqs,
            "tag": self.tag,
            "technology": self.technology,
            "mcqPrompt": self.mcqPrompt,
            "level": self.level,
        }


class ErrorResponse(BaseModel):
    error: str
