"""Quiz Schemas - Modelos Pydantic para domínio e request/response.

Os nomes no JSON seguem camelCase (quizId, selectedOptions, ...) para manter
compatibilidade com os clientes existentes; os atributos Python são snake_case.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

OPTIONS_PER_QUESTION = 4


class QuizQuestion(BaseModel):
    """Questão de múltipla escolha com uma única resposta correta."""

    id: str = Field(..., description="Identificador estável da questão dentro do quiz (q1..qN)")
    question: str = Field(..., description="Enunciado da questão")
    options: list[str] = Field(..., description="4 alternativas distintas")
    answer: str = Field(..., description="Alternativa correta (deve estar em options)")

    @field_validator("question")
    @classmethod
    def question_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("question não pode ser vazia")
        return v

    @field_validator("options")
    @classmethod
    def four_distinct_options(cls, v: list[str]) -> list[str]:
        if len(v) != OPTIONS_PER_QUESTION:
            raise ValueError(f"Deve ter exatamente {OPTIONS_PER_QUESTION} alternativas")
        if any(not opt.strip() for opt in v):
            raise ValueError("Alternativas não podem ser vazias")
        if len(set(v)) != len(v):
            raise ValueError("Alternativas devem ser distintas")
        return v

    @model_validator(mode="after")
    def answer_among_options(self) -> "QuizQuestion":
        if self.answer not in self.options:
            raise ValueError("answer deve ser uma das alternativas")
        return self


class Quiz(BaseModel):
    """Quiz persistido, imutável após a criação."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="ID único do quiz")
    title: str = Field(..., description="Título do quiz")
    content: str = Field(..., description="Tópico ou texto de origem")
    questions: list[QuizQuestion] = Field(..., min_length=1, description="Questões em ordem")
    created_by: str = Field(..., alias="createdBy", description="ID do usuário criador")
    created_at: datetime = Field(..., alias="createdAt", description="Data de criação (UTC)")


class AnswerRecord(BaseModel):
    """Resposta corrigida de uma questão."""

    model_config = ConfigDict(populate_by_name=True)

    question: str = Field(..., description="Texto da questão respondida")
    question_id: str | None = Field(
        default=None, alias="questionId", description="ID da questão no quiz (se encontrada)"
    )
    selected_options: list[str] = Field(..., alias="selectedOptions")
    correct_answers: list[str] = Field(..., alias="correctAnswers")
    is_correct: bool = Field(..., alias="isCorrect")


class Submission(BaseModel):
    """Submissão corrigida de um usuário para um quiz."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="ID único da submissão")
    user: str = Field(..., description="ID do usuário")
    quiz: str = Field(..., description="ID do quiz")
    answers: list[AnswerRecord] = Field(default_factory=list)
    score: int = Field(..., ge=0, description="Quantidade de respostas corretas")
    total_questions: int = Field(..., ge=0, alias="totalQuestions")
    submitted_at: datetime = Field(..., alias="submittedAt")

    @model_validator(mode="after")
    def score_matches_answers(self) -> "Submission":
        correct = sum(1 for a in self.answers if a.is_correct)
        if self.score != correct:
            raise ValueError(f"score ({self.score}) difere das respostas corretas ({correct})")
        return self


# =============================================================================
# REQUEST / RESPONSE
# =============================================================================


class GenerateQuizRequest(BaseModel):
    """Request para gerar quiz a partir de um tópico ou texto."""

    model_config = ConfigDict(populate_by_name=True)

    content: str | None = Field(default=None, description="Tópico ou texto extraído")
    user_id: str | None = Field(default=None, alias="userId")


class GenerateQuizResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str = "Quiz generated successfully"
    quiz: list[QuizQuestion] = Field(..., description="Questões geradas")
    quiz_id: str = Field(..., alias="quizId")


class SubmittedAnswer(BaseModel):
    """Resposta enviada pelo aluno para uma questão."""

    model_config = ConfigDict(populate_by_name=True)

    question: str = Field(default="", description="Texto da questão (fallback legado)")
    question_id: str | None = Field(default=None, alias="questionId")
    selected_options: list[str] = Field(default_factory=list, alias="selectedOptions")


class SubmitQuizRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    quiz_id: str = Field(..., alias="quizId")
    answers: list[SubmittedAnswer] = Field(default_factory=list)
    score: int | None = Field(
        default=None, description="Score calculado pelo cliente (ignorado, apenas auditado)"
    )


class SubmitQuizResponse(BaseModel):
    message: str = "Quiz submitted successfully!"
    submission: Submission


class PreviousQuizRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    quiz_id: str | None = Field(default=None, alias="quizId")
    user_id: str | None = Field(default=None, alias="userId")


class PreviousQuizResponse(BaseModel):
    success: bool = True
    data: Submission
