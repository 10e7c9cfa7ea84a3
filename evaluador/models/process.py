#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Modelos del proceso de contratación: reglas de puntaje y de experiencia.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Dict, List, Optional

from pydantic import Field, ValidationInfo, field_validator

from .base import CamelModel, blank_to_default, coerce_date, ensure_list

MAX_ADDITIONAL_CRITERIA = 5


class ProcessType(str, Enum):
    """Modalidades de selección."""

    LICITACION = "licitacion"
    CONCURSO = "concurso"
    ABREVIADA = "abreviada"
    MINIMA = "minima"


class MeasurementUnit(str, Enum):
    """Unidades de la experiencia específica adicional."""

    LONGITUD = "longitud"
    AREA_CUBIERTA = "area_cubierta"
    AREA_EJECUTADA = "area_ejecutada"
    SMLMV = "smlmv"


class ScoringCriteria(CamelModel):
    """Puntajes máximos por criterio definidos por el proceso."""

    woman_entrepreneurship: float = Field(default=0, ge=0)
    mipyme: float = Field(default=0, ge=0)
    disabled: float = Field(default=0, ge=0)
    quality_factor: float = Field(default=0, ge=0)
    environmental_quality: float = Field(default=0, ge=0)
    national_industry_support: float = Field(default=0, ge=0)

    @field_validator("*", mode="before")
    @classmethod
    def _default_score(cls, value):
        return value if value is not None else 0


class AdditionalCriterion(CamelModel):
    """Criterio de experiencia específica adicional (valor mínimo requerido)."""

    name: str = ""
    value: float = Field(default=0, ge=0)
    unit: MeasurementUnit = MeasurementUnit.LONGITUD

    @field_validator("value", mode="before")
    @classmethod
    def _default_value(cls, value):
        return value if value is not None else 0

    @field_validator("name", mode="before")
    @classmethod
    def _default_name(cls, value):
        return str(value) if value is not None else ""

    @field_validator("unit", mode="before")
    @classmethod
    def _default_unit(cls, value, info: ValidationInfo):
        return blank_to_default(cls, value, info)


class ExperienceRequirements(CamelModel):
    general: str = ""
    specific: str = ""
    additional_specific: List[AdditionalCriterion] = Field(
        default_factory=list, max_length=MAX_ADDITIONAL_CRITERIA
    )
    classifier_codes: List[str] = Field(default_factory=list)

    @field_validator("additional_specific", mode="before")
    @classmethod
    def _default_criteria(cls, value):
        return ensure_list(value)

    @field_validator("classifier_codes", mode="before")
    @classmethod
    def _default_codes(cls, value):
        return [str(code) for code in ensure_list(value) if code is not None]

    @field_validator("general", "specific", mode="before")
    @classmethod
    def _default_text(cls, value):
        return value or ""


class ProcessDefinition(CamelModel):
    """Reglas de un proceso de contratación."""

    process_number: str = ""
    process_object: str = ""
    closing_date: Optional[date] = None
    total_contract_value: float = 0
    minimum_salary: float = 0
    process_type: ProcessType = ProcessType.LICITACION
    scoring: ScoringCriteria = Field(default_factory=ScoringCriteria)
    experience: ExperienceRequirements = Field(default_factory=ExperienceRequirements)

    @field_validator("closing_date", mode="before")
    @classmethod
    def _parse_closing_date(cls, value):
        return coerce_date(value)

    @field_validator("scoring", "experience", mode="before")
    @classmethod
    def _default_sections(cls, value):
        return value if value is not None else {}

    @field_validator("process_type", mode="before")
    @classmethod
    def _default_type(cls, value, info: ValidationInfo):
        return blank_to_default(cls, value, info)

    @property
    def scoring_maxima(self) -> Dict[str, float]:
        return self.scoring.model_dump()

    @property
    def additional_criteria(self) -> List[AdditionalCriterion]:
        return self.experience.additional_specific

    @property
    def classifier_codes(self) -> List[str]:
        return self.experience.classifier_codes
