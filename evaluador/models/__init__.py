#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Modelos de datos del evaluador de proponentes
"""

from .process import (
    ProcessDefinition,
    ProcessType,
    ScoringCriteria,
    ExperienceRequirements,
    AdditionalCriterion,
    MeasurementUnit,
)
from .contract import Contract, ContractType, ExecutionForm, RequiredExperience, AdditionalAmount
from .proponent import (
    Proponent,
    Partner,
    RupStatus,
    ProponentScoring,
    Requirements,
    AdditionalComplianceResult,
)

__all__ = [
    "ProcessDefinition",
    "ProcessType",
    "ScoringCriteria",
    "ExperienceRequirements",
    "AdditionalCriterion",
    "MeasurementUnit",
    "Contract",
    "ContractType",
    "ExecutionForm",
    "RequiredExperience",
    "AdditionalAmount",
    "Proponent",
    "Partner",
    "RupStatus",
    "ProponentScoring",
    "Requirements",
    "AdditionalComplianceResult",
]
