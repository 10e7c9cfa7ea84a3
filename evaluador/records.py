#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Conversión entre filas almacenadas y registros del evaluador

Las filas usan columnas snake_case (process_data, proponents) con bloques
JSON en camelCase. Las colecciones ausentes o malformadas se normalizan a
listas vacías al construir los modelos.
"""

import logging
from typing import Any, Dict, Optional

from .models import ProcessDefinition, Proponent

logger = logging.getLogger(__name__)


def process_from_record(row: Dict[str, Any]) -> ProcessDefinition:
    """Fila de process_data -> ProcessDefinition"""
    row = row or {}
    data = {
        "processNumber": row.get("process_number") or "",
        "processObject": row.get("process_name") or "",
        "closingDate": row.get("closing_date"),
        "totalContractValue": row.get("total_contract_value") or 0,
        "minimumSalary": row.get("minimum_salary") or 0,
        "scoring": row.get("scoring_criteria") or {},
        "experience": row.get("experience") or {},
    }
    if row.get("process_type"):
        data["processType"] = row["process_type"]

    return ProcessDefinition.model_validate(data)


def process_to_record(process: ProcessDefinition) -> Dict[str, Any]:
    """ProcessDefinition -> columnas de process_data"""
    return {
        "process_number": process.process_number,
        "process_name": process.process_object,
        "closing_date": process.closing_date.isoformat() if process.closing_date else None,
        "total_contract_value": process.total_contract_value,
        "minimum_salary": process.minimum_salary,
        "process_type": process.process_type.value,
        "experience": process.experience.model_dump(mode="json", by_alias=True),
        "scoring_criteria": process.scoring.model_dump(mode="json", by_alias=True),
    }


def proponent_from_record(row: Dict[str, Any]) -> Proponent:
    """Fila de proponents -> Proponent"""
    row = row or {}
    data = {
        "number": row.get("number"),
        "name": row.get("name"),
        "isPlural": row.get("is_plural"),
        "partners": row.get("partners"),
        "rup": row.get("rup"),
        "scoring": row.get("scoring"),
        "requirements": row.get("requirements"),
        "contractors": row.get("contractors"),
        "totalScore": row.get("total_score"),
        "needsSubsanation": row.get("needs_subsanation"),
        "subsanationDetails": row.get("subsanation_details"),
    }
    if row.get("id"):
        data["id"] = str(row["id"])

    proponent = Proponent.model_validate(data)
    logger.debug(f"Proponente cargado: {proponent.name} ({len(proponent.contractors)} contratos)")
    return proponent


def proponent_to_record(
    proponent: Proponent,
    process_id: Optional[str] = None,
) -> Dict[str, Any]:
    """Proponent -> columnas de proponents"""
    blob = proponent.model_dump(mode="json", by_alias=True)
    record = {
        "id": proponent.id,
        "number": proponent.number,
        "name": proponent.name,
        "is_plural": proponent.is_plural,
        "partners": blob["partners"] if proponent.is_plural else None,
        "rup": blob["rup"],
        "scoring": blob["scoring"],
        "requirements": blob["requirements"],
        "contractors": blob["contractors"],
        "total_score": proponent.total_score,
        "needs_subsanation": proponent.needs_subsanation,
        "subsanation_details": list(proponent.subsanation_details) or None,
    }
    if process_id is not None:
        record["process_data_id"] = process_id
    return record
