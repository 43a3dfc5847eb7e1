"""Path parameter parsing. A malformed id can never match, so it is a 404."""

from growthkit.domain.exceptions import EntityNotFoundError
from growthkit.domain.value_objects.contribution_id import ContributionId
from growthkit.domain.value_objects.tool_id import ToolId


def parse_tool_id(value: str) -> ToolId:
    try:
        return ToolId(value)
    except ValueError as e:
        raise EntityNotFoundError("Tool not found.") from e


def parse_contribution_id(value: str) -> ContributionId:
    try:
        return ContributionId(value)
    except ValueError as e:
        raise EntityNotFoundError("Contribution not found.") from e
