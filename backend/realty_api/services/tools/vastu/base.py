"""Vastu check foundation: findings and the base check."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional

from realty_api.core.enums import FindingStatus
from realty_api.models.schemas.vastu import VastuRequest


@dataclass
class VastuFinding:
    """
    Result of one Vastu observation.

    Attributes:
        category: Aspect analysed (orientation, shape, slope, ...)
        observation: What was observed on the plot
        status: positive, neutral or negative
        description: Traditional reading of the observation
        impact: Expected effect on the inhabitants
        remedy: Suggested correction, if any
        penalty: Points deducted from the score
    """

    category: str
    observation: str
    status: FindingStatus
    description: str
    impact: str
    remedy: Optional[str] = None
    penalty: int = 0


class VastuCheck(ABC):
    """
    Abstract base class for Vastu checks.

    Each concrete check analyses one aspect of the plot and returns
    zero or more findings.
    """

    category: str = ""

    @abstractmethod
    def evaluate(self, request: VastuRequest) -> List[VastuFinding]:
        """
        Analyse one aspect of the plot.

        Args:
            request: Validated Vastu inputs

        Returns:
            Findings for this aspect (possibly empty)
        """
        pass

    def _finding(
        self,
        observation: str,
        status: FindingStatus,
        description: str,
        impact: str,
        remedy: Optional[str] = None,
        penalty: int = 0,
    ) -> VastuFinding:
        return VastuFinding(
            category=self.category,
            observation=observation,
            status=status,
            description=description,
            impact=impact,
            remedy=remedy,
            penalty=penalty,
        )
