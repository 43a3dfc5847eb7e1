"""Calculator DTOs for API responses."""

from __future__ import annotations
from typing import Literal
from pydantic import BaseModel
from growthkit.domain.services import ABTestResult, SubjectLineResult


class ABTestResultDTO(BaseModel):
    rate_a: float
    rate_b: float
    z_score: float
    p_value: float
    significant: bool
    winner: Literal["A", "B", "None"]
    confidence: str

    @classmethod
    def from_result(cls, result: ABTestResult) -> ABTestResultDTO:
        return cls(**result.to_dict())


class SubjectLineFeedbackDTO(BaseModel):
    type: Literal["success", "warning", "info"]
    message: str


class SubjectLineResultDTO(BaseModel):
    score: int
    feedback: list[SubjectLineFeedbackDTO]

    @classmethod
    def from_result(cls, result: SubjectLineResult) -> SubjectLineResultDTO:
        return cls(**result.to_dict())


class HeadlinesDTO(BaseModel):
    headlines: list[str]
