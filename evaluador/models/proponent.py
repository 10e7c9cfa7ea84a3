#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Modelos del proponente evaluado.
"""

from __future__ import annotations

import uuid
from datetime import date
from typing import Dict, List, Optional

from pydantic import Field, ValidationInfo, field_validator

from .base import CamelModel, blank_to_default, coerce_date, ensure_list
from .contract import Contract


class Partner(CamelModel):
    """Integrante de un proponente plural (consorcio o unión temporal)."""

    name: str = ""
    percentage: float = Field(default=0, ge=0, le=100)
    rup_renewal_date: Optional[date] = None

    @field_validator("rup_renewal_date", mode="before")
    @classmethod
    def _parse_date(cls, value):
        return coerce_date(value)

    @field_validator("percentage", mode="before")
    @classmethod
    def _default_percentage(cls, value):
        return value if value is not None else 0


class RupStatus(CamelModel):
    renewal_date: Optional[date] = None
    complies: bool = False

    @field_validator("renewal_date", mode="before")
    @classmethod
    def _parse_date(cls, value):
        return coerce_date(value)

    @field_validator("complies", mode="before")
    @classmethod
    def _default_flag(cls, value, info: ValidationInfo):
        return blank_to_default(cls, value, info)


class ProponentScoring(CamelModel):
    """Puntaje asignado por criterio y comentarios de justificación."""

    woman_entrepreneurship: float = 0
    mipyme: float = 0
    disabled: float = 0
    quality_factor: float = 0
    environmental_quality: float = 0
    national_industry_support: float = 0
    disability_contributor: Optional[str] = None
    comments: Dict[str, str] = Field(default_factory=dict)

    @field_validator(
        "woman_entrepreneurship",
        "mipyme",
        "disabled",
        "quality_factor",
        "environmental_quality",
        "national_industry_support",
        mode="before",
    )
    @classmethod
    def _default_score(cls, value):
        return value if value is not None else 0

    @field_validator("comments", mode="before")
    @classmethod
    def _default_comments(cls, value):
        if not isinstance(value, dict):
            return {}
        return {key: text for key, text in value.items() if text is not None}


class AdditionalComplianceResult(CamelModel):
    name: str = ""
    amount: float = 0
    complies: bool = False
    comment: Optional[str] = None

    @field_validator("amount", mode="before")
    @classmethod
    def _default_amount(cls, value):
        return value if value is not None else 0

    @field_validator("complies", mode="before")
    @classmethod
    def _default_flag(cls, value, info: ValidationInfo):
        return blank_to_default(cls, value, info)


class Requirements(CamelModel):
    """Requisitos habilitantes verificados para el proponente."""

    general_experience: bool = False
    specific_experience: bool = False
    professional_card: bool = False
    additional_specific_experience: List[AdditionalComplianceResult] = Field(
        default_factory=list
    )

    @field_validator("additional_specific_experience", mode="before")
    @classmethod
    def _default_results(cls, value):
        return ensure_list(value)

    @field_validator(
        "general_experience", "specific_experience", "professional_card", mode="before"
    )
    @classmethod
    def _default_flags(cls, value, info: ValidationInfo):
        return blank_to_default(cls, value, info)


class Proponent(CamelModel):
    """
    Proponente evaluado.

    total_score, rup.complies, needs_subsanation y subsanation_details son
    derivados: se recalculan con refresh_proponent() tras cada edición.
    """

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    number: str = ""
    name: str = ""
    is_plural: bool = False
    partners: List[Partner] = Field(default_factory=list)
    rup: RupStatus = Field(default_factory=RupStatus)
    scoring: ProponentScoring = Field(default_factory=ProponentScoring)
    requirements: Requirements = Field(default_factory=Requirements)
    contractors: List[Contract] = Field(default_factory=list)
    total_score: float = 0
    needs_subsanation: bool = False
    subsanation_details: List[str] = Field(default_factory=list)

    @field_validator("partners", "contractors", "subsanation_details", mode="before")
    @classmethod
    def _default_collections(cls, value):
        return ensure_list(value)

    @field_validator("rup", "scoring", "requirements", mode="before")
    @classmethod
    def _default_sections(cls, value):
        return value if value is not None else {}

    @field_validator("total_score", mode="before")
    @classmethod
    def _default_total(cls, value):
        return value if value is not None else 0

    @field_validator("is_plural", "needs_subsanation", mode="before")
    @classmethod
    def _default_flags(cls, value, info: ValidationInfo):
        return blank_to_default(cls, value, info)

    @field_validator("number", "name", mode="before")
    @classmethod
    def _default_text(cls, value):
        return str(value) if value is not None else ""
