"""Quiz Templates - Prompt de geração de questões."""

from ..errors import EmptyContent

DEFAULT_QUESTION_COUNT = 21

# =============================================================================
# PROMPT TEMPLATES
# =============================================================================

# O parser não remove cercas de markdown nem texto ao redor: a resposta
# precisa ser exatamente um array JSON.
QUIZ_GENERATION_PROMPT = """Generate a quiz with {num_questions} multiple-choice questions in JSON format.
Each question must have:
- A "question" field with the question text.
- An "options" field (array) with exactly 4 distinct answer choices.
- An "answer" field with the correct option, copied exactly from "options".

Return ONLY a JSON array. Do NOT include any explanation, text, or markdown formatting.

Example of the expected shape:
[{{"question": "...", "options": ["...", "...", "...", "..."], "answer": "..."}}]

Content: {content}"""


class PromptBuilder:
    """Renderiza o prompt de geração de quiz.

    Determinístico e sem efeitos colaterais: o mesmo conteúdo sempre gera
    o mesmo prompt.

    Example:
        >>> builder = PromptBuilder()
        >>> prompt = builder.build("Photosynthesis")
        >>> "21 multiple-choice" in prompt
        True
    """

    def __init__(self, question_count: int = DEFAULT_QUESTION_COUNT):
        self.question_count = question_count

    def build(self, content: str) -> str:
        """Gera o prompt para o conteúdo informado.

        Args:
            content: Tópico ou texto de origem

        Returns:
            Prompt pronto para o serviço de completion

        Raises:
            EmptyContent: Se o conteúdo for vazio após trim
        """
        if content is None or not content.strip():
            raise EmptyContent()

        return QUIZ_GENERATION_PROMPT.format(
            num_questions=self.question_count,
            content=content.strip(),
        )
