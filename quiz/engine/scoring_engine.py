"""Submission Grader - Correção determinística das respostas."""

from collections.abc import Iterable, Sequence

from ..models.schemas import AnswerRecord, Quiz, QuizQuestion, SubmittedAnswer


def answers_match(selected: Iterable[str], correct: Iterable[str]) -> bool:
    """Política única de correção: igualdade de conjuntos.

    Ordem e duplicatas são ignoradas. Marcar a alternativa correta junto
    com outra alternativa conta como erro.

    Args:
        selected: Alternativas marcadas pelo aluno
        correct: Alternativas corretas da questão

    Returns:
        True se os conjuntos forem iguais e não vazios
    """
    expected = set(correct)
    return bool(expected) and set(selected) == expected


class SubmissionGrader:
    """Corrige uma submissão contra o quiz armazenado.

    Função pura: não altera o quiz nem faz I/O; a mesma entrada sempre
    gera os mesmos registros e o mesmo score.

    Cada resposta é associada a questão pelo ``question_id``; se o cliente
    não enviar o id (ou enviar um id desconhecido), usa o texto exato da
    questão, primeira ocorrência. Sem correspondência a resposta conta como
    errada, sem erro.

    Example:
        >>> grader = SubmissionGrader()
        >>> records, score = grader.grade(quiz, answers)
    """

    def grade(
        self, quiz: Quiz, answers: Sequence[SubmittedAnswer]
    ) -> tuple[list[AnswerRecord], int]:
        """Corrige todas as respostas.

        Args:
            quiz: Quiz original
            answers: Respostas enviadas, na ordem do cliente

        Returns:
            Tuple de (registros corrigidos, score)
        """
        by_id = {q.id: q for q in quiz.questions}

        records = []
        for answer in answers:
            question = self._find_question(quiz, by_id, answer)
            records.append(self.evaluate_answer(answer, question))

        score = sum(1 for r in records if r.is_correct)
        return records, score

    @staticmethod
    def _find_question(
        quiz: Quiz, by_id: dict[str, QuizQuestion], answer: SubmittedAnswer
    ) -> QuizQuestion | None:
        if answer.question_id and answer.question_id in by_id:
            return by_id[answer.question_id]

        # Fallback legado: texto exato, primeira ocorrência
        for question in quiz.questions:
            if question.question == answer.question:
                return question
        return None

    @staticmethod
    def evaluate_answer(
        answer: SubmittedAnswer, question: QuizQuestion | None
    ) -> AnswerRecord:
        """Avalia uma resposta individual."""
        correct = [question.answer] if question is not None else []

        return AnswerRecord(
            question=question.question if question is not None else answer.question,
            question_id=question.id if question is not None else None,
            selected_options=list(answer.selected_options),
            correct_answers=correct,
            is_correct=answers_match(answer.selected_options, correct),
        )
