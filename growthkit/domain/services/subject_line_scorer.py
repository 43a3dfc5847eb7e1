"""
Subject-Line Scorer - additive heuristic rules for email subject lines.

Every rule is independent. Rule order only decides the order of the feedback
list, never the score.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from growthkit.domain.exceptions import InvalidInputError

MAX_SCORE = 100
MIN_GOOD_LENGTH = 20
MAX_GOOD_LENGTH = 60
LENGTH_PENALTY = 15
NO_POWER_WORD_PENALTY = 10
NO_DIGIT_PENALTY = 5
ALL_CAPS_PENALTY = 20
ALL_CAPS_MIN_TOKEN_LENGTH = 3

POWER_WORDS = ("amazing", "free", "new", "guaranteed", "proven")


class FeedbackType(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"
    INFO = "info"


@dataclass(frozen=True)
class Feedback:
    type: FeedbackType
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"type": self.type.value, "message": self.message}


@dataclass(frozen=True)
class SubjectLineInput:
    subject_line: str

    def validate(self) -> None:
        if not isinstance(self.subject_line, str) or not self.subject_line:
            raise InvalidInputError("Subject line is required.")


@dataclass(frozen=True)
class SubjectLineResult:
    score: int
    feedback: tuple[Feedback, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "feedback": [item.to_dict() for item in self.feedback],
        }


def has_power_word(text: str) -> bool:
    lowered = text.lower()
    return any(word in lowered for word in POWER_WORDS)


def has_digit(text: str) -> bool:
    return any(ch in "0123456789" for ch in text)


def has_all_caps_word(text: str) -> bool:
    return any(
        len(token) >= ALL_CAPS_MIN_TOKEN_LENGTH and token == token.upper()
        for token in text.split()
    )


class SubjectLineScorer:
    def score(self, data: SubjectLineInput) -> SubjectLineResult:
        data.validate()
        subject = data.subject_line

        score = MAX_SCORE
        feedback: list[Feedback] = []

        length = len(subject)
        if length < MIN_GOOD_LENGTH:
            score -= LENGTH_PENALTY
            feedback.append(
                Feedback(
                    FeedbackType.WARNING,
                    "A bit short. Consider adding more detail to entice readers.",
                )
            )
        elif length > MAX_GOOD_LENGTH:
            score -= LENGTH_PENALTY
            feedback.append(
                Feedback(
                    FeedbackType.WARNING,
                    "Too long. It might get cut off in some email clients.",
                )
            )
        else:
            feedback.append(
                Feedback(
                    FeedbackType.SUCCESS,
                    "Good length. It's concise and likely to be fully visible.",
                )
            )

        if has_power_word(subject):
            feedback.append(
                Feedback(
                    FeedbackType.SUCCESS,
                    "Includes a power word that can boost open rates.",
                )
            )
        else:
            score -= NO_POWER_WORD_PENALTY
            feedback.append(
                Feedback(
                    FeedbackType.INFO,
                    'Consider adding a "power word" like "new" or "proven" to create urgency.',
                )
            )

        if has_digit(subject):
            feedback.append(
                Feedback(
                    FeedbackType.SUCCESS,
                    "Using numbers can increase clarity and click-through rates.",
                )
            )
        else:
            score -= NO_DIGIT_PENALTY
            feedback.append(
                Feedback(
                    FeedbackType.INFO,
                    "Adding a specific number or statistic can make your subject line more compelling.",
                )
            )

        if "?" in subject:
            feedback.append(
                Feedback(
                    FeedbackType.SUCCESS,
                    "Asking a question engages the reader and piques curiosity.",
                )
            )

        if has_all_caps_word(subject):
            score -= ALL_CAPS_PENALTY
            feedback.append(
                Feedback(
                    FeedbackType.WARNING,
                    "Avoid using all caps, as it can look like spam.",
                )
            )

        return SubjectLineResult(score=max(0, score), feedback=tuple(feedback))


def score_subject_line(data: SubjectLineInput) -> SubjectLineResult:
    return SubjectLineScorer().score(data)
