"""Pydantic models for clause explainers (supplementary, per-language content)."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ubbl.corpus.models import Severity


class Example(BaseModel):
    """A worked scenario showing how a clause is satisfied."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    scenario: str
    solution: str
    building_type: Optional[str] = None
    location: Optional[str] = None


class CommonViolation(BaseModel):
    """A frequently seen way of breaching a clause."""

    model_config = ConfigDict(frozen=True)

    description: str
    severity: Severity
    common_causes: list[str] = Field(default_factory=list)
    how_to_avoid: list[str] = Field(default_factory=list)
    penalty: Optional[str] = None
    examples: list[str] = Field(default_factory=list)


class BestPractice(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    implementation_steps: list[str] = Field(default_factory=list)
    benefits: list[str] = Field(default_factory=list)
    cost_implications: Optional[str] = None
    time_savings: Optional[str] = None


class CaseStudy(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    project_name: str
    location: str
    building_type: str
    challenge: str
    solution: str
    outcome: str
    lessons_learned: list[str] = Field(default_factory=list)


class Explainer(BaseModel):
    """One clause's educational content in one language."""

    model_config = ConfigDict(frozen=True)

    clause_id: str
    language: str
    simplified: str
    """Plain-language summary for students and clients."""

    detailed: str = ""
    technical_notes: str = ""
    examples: list[Example] = Field(default_factory=list)
    common_violations: list[CommonViolation] = Field(default_factory=list)
    best_practices: list[BestPractice] = Field(default_factory=list)
    case_studies: list[CaseStudy] = Field(default_factory=list)
    calculators: list[str] = Field(default_factory=list)
    """Names of calculators that help apply the clause."""

    learning_objectives: list[str] = Field(default_factory=list)
    difficulty_level: int = Field(default=1, ge=1, le=5)
    estimated_read_time: int = 0
    """Minutes."""
