"""
Calculators API Router - the interactive tools.

Any signed-in user may run a calculator. Results are computed per request and
never stored.
"""

from fastapi import APIRouter, Depends, Request
from dishka.integrations.fastapi import FromDishka, inject
from pydantic import BaseModel, StrictInt
from growthkit.application.dto import (
    ABTestResultDTO,
    HeadlinesDTO,
    SubjectLineResultDTO,
)
from growthkit.application.queries.calculators import (
    CalculateABTestHandler,
    CalculateABTestQuery,
    GenerateHeadlinesHandler,
    GenerateHeadlinesQuery,
    ScoreSubjectLineHandler,
    ScoreSubjectLineQuery,
)
from growthkit.config.settings import Config
from growthkit.domain.services import ABTestInput
from growthkit.presentation.dependencies.auth import AuthUser, get_current_user
from growthkit.presentation.rate_limit import limiter


# ==================== REQUEST MODELS ====================
class GenerateHeadlineRequest(BaseModel):
    topic: str = ""
    tone: str = ""


class ABTestRequest(BaseModel):
    visitors_a: StrictInt
    conversions_a: StrictInt
    visitors_b: StrictInt
    conversions_b: StrictInt


class SubjectLineRequest(BaseModel):
    subject_line: str = ""


# ==================== ROUTER ====================
router = APIRouter(prefix="/api/tools", tags=["calculators"])


# ==================== ENDPOINTS ====================
@router.post("/generate-headline", response_model=HeadlinesDTO)
@limiter.limit(Config.CALCULATOR_RATE_LIMIT)
@inject
async def generate_headline(
    request: Request,
    body: GenerateHeadlineRequest,
    handler: FromDishka[GenerateHeadlinesHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    headlines = await handler.execute(
        GenerateHeadlinesQuery(
            user_email=current_user.email, topic=body.topic, tone=body.tone
        )
    )
    return HeadlinesDTO(headlines=headlines)


@router.post("/calculate-ab-test", response_model=ABTestResultDTO)
@limiter.limit(Config.CALCULATOR_RATE_LIMIT)
@inject
async def calculate_ab_test(
    request: Request,
    body: ABTestRequest,
    handler: FromDishka[CalculateABTestHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    result = await handler.execute(
        CalculateABTestQuery(
            user_email=current_user.email,
            data=ABTestInput(
                visitors_a=body.visitors_a,
                conversions_a=body.conversions_a,
                visitors_b=body.visitors_b,
                conversions_b=body.conversions_b,
            ),
        )
    )
    return ABTestResultDTO.from_result(result)


@router.post("/test-subject-line", response_model=SubjectLineResultDTO)
@limiter.limit(Config.CALCULATOR_RATE_LIMIT)
@inject
async def test_subject_line(
    request: Request,
    body: SubjectLineRequest,
    handler: FromDishka[ScoreSubjectLineHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    result = await handler.execute(
        ScoreSubjectLineQuery(
            user_email=current_user.email, subject_line=body.subject_line
        )
    )
    return SubjectLineResultDTO.from_result(result)
