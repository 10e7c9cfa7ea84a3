#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Modelo de contrato aportado como experiencia por un proponente.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import Field, ValidationInfo, field_validator

from .base import CamelModel, blank_to_default, ensure_list


class ContractType(str, Enum):
    PUBLIC = "public"
    PRIVATE = "private"


class ExecutionForm(str, Enum):
    """Forma de ejecución: individual, consorcio, unión temporal u otra."""

    INDIVIDUAL = "I"
    CONSORCIO = "C"
    UNION_TEMPORAL = "UT"
    OTRA = "OTRA"


class RequiredExperience(str, Enum):
    GENERAL = "general"
    SPECIFIC = "specific"
    BOTH = "both"


class AdditionalAmount(CamelModel):
    """Monto aportado a un criterio adicional, por posición."""

    name: str = ""
    value: float = 0

    @field_validator("value", mode="before")
    @classmethod
    def _default_value(cls, value):
        return value if value is not None else 0


def _coerce_amounts(value) -> List[dict]:
    amounts = []
    for item in ensure_list(value):
        if isinstance(item, (int, float)) and not isinstance(item, bool):
            amounts.append({"name": "", "value": item})
        elif item is None:
            amounts.append({"name": "", "value": 0})
        else:
            amounts.append(item)
    return amounts


class Contract(CamelModel):
    """
    Contrato de experiencia.

    Los campos adjusted_value, adjusted_additional_specific_value y
    classifier_codes_match son derivados; se recalculan con
    ContractValueAdjuster.apply().
    """

    name: str = ""
    rup_consecutive: str = ""
    required_experience: RequiredExperience = RequiredExperience.GENERAL
    contracting_entity: str = ""
    contract_number: str = ""
    object: str = ""
    services_code: str = ""
    execution_form: ExecutionForm = ExecutionForm.INDIVIDUAL
    participation_percentage: float = Field(default=100, ge=0, le=100)
    experience_contributor: str = ""
    total_value_smmlv: float = Field(default=0, alias="totalValueSMMLV")
    adjusted_value: float = 0
    additional_specific_experience_contribution: List[AdditionalAmount] = Field(
        default_factory=list
    )
    adjusted_additional_specific_value: List[AdditionalAmount] = Field(
        default_factory=list
    )
    contract_type: ContractType = ContractType.PUBLIC
    private_documents_complete: Optional[bool] = None
    contract_complies: bool = False
    non_compliance_reason: Optional[str] = None
    selected_classifier_codes: List[str] = Field(default_factory=list)
    classifier_codes_match: bool = False

    @field_validator(
        "additional_specific_experience_contribution",
        "adjusted_additional_specific_value",
        mode="before",
    )
    @classmethod
    def _default_amounts(cls, value):
        return _coerce_amounts(value)

    @field_validator("selected_classifier_codes", mode="before")
    @classmethod
    def _default_codes(cls, value):
        return [str(code) for code in ensure_list(value) if code is not None]

    @field_validator("participation_percentage", "total_value_smmlv", "adjusted_value", mode="before")
    @classmethod
    def _default_number(cls, value):
        return value if value is not None else 0

    @field_validator(
        "name",
        "rup_consecutive",
        "contracting_entity",
        "contract_number",
        "object",
        "services_code",
        "experience_contributor",
        mode="before",
    )
    @classmethod
    def _default_text(cls, value):
        return str(value) if value is not None else ""

    @field_validator(
        "required_experience",
        "execution_form",
        "contract_type",
        "private_documents_complete",
        "contract_complies",
        "classifier_codes_match",
        mode="before",
    )
    @classmethod
    def _default_choice(cls, value, info: ValidationInfo):
        return blank_to_default(cls, value, info)
