#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
API del evaluador de proponentes

Aplicación FastAPI que usa la capa de formularios para recalcular los
campos derivados tras cada edición. No guarda estado: cada solicitud trae
el proceso y los proponentes completos.
"""

import logging
import os
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import Field

from evaluador import __version__
from evaluador.config import EngineSettings
from evaluador.contracts import ContractValueAdjuster
from evaluador.classifier import ClassifierMatcher
from evaluador.evaluation import ProponentRefresher
from evaluador.experience import ExperienceApportionment
from evaluador.models import Contract, ProcessDefinition, Proponent
from evaluador.models.base import CamelModel
from evaluador.reports import RankingReport
from evaluador.rup import DateComplianceChecker

settings = EngineSettings.from_env()

logging.basicConfig(level=getattr(logging, settings.log_level, logging.INFO))
logger = logging.getLogger(__name__)

# Inicialización de la aplicación
app = FastAPI(
    title="Evaluador de proponentes API",
    description="API de evaluación de requisitos habilitantes y puntaje",
    version=__version__,
    docs_url="/api/docs",
    redoc_url="/api/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

rup_checker = DateComplianceChecker(settings.rup_window_days)
adjuster = ContractValueAdjuster(ClassifierMatcher(settings.classifier_empty_matches))
apportionment = ExperienceApportionment(settings.disability_threshold)
refresher = ProponentRefresher(settings)
report_generator = RankingReport()


# ===================== Modelos de solicitud =====================

class RupCheckRequest(CamelModel):
    closing_date: Optional[str] = None
    renewal_date: Optional[str] = None
    window_days: Optional[int] = Field(default=None, ge=0)


class ContractAdjustRequest(CamelModel):
    contract: Contract
    process: Optional[ProcessDefinition] = None


class SharesRequest(CamelModel):
    proponent: Proponent


class EvaluationRequest(CamelModel):
    process: ProcessDefinition
    proponent: Proponent


class ReportRequest(CamelModel):
    process: ProcessDefinition
    proponents: List[Proponent] = Field(default_factory=list)
    refresh: bool = True


# ===================== Endpoints =====================

@app.get("/")
async def root():
    return {
        "message": f"Evaluador de proponentes API v{__version__}",
        "status": "running",
        "endpoints": {
            "api_docs": "/api/docs",
            "health": "/health",
        }
    }


@app.get("/health")
async def health_check():
    """Estado del servicio"""
    return {
        "status": "healthy",
        "service": "evaluador",
        "version": __version__,
        "settings": {
            "rup_window_days": settings.rup_window_days,
            "disability_threshold": settings.disability_threshold,
            "classifier_empty_matches": settings.classifier_empty_matches,
        }
    }


@app.post("/api/v1/rup/check")
async def check_rup(request: RupCheckRequest):
    """Vigencia de una fecha de renovación del RUP"""
    window = settings.rup_window_days if request.window_days is None else request.window_days
    return {
        "days": rup_checker.days_between(request.closing_date, request.renewal_date),
        "window_days": window,
        "complies": rup_checker.is_within_window(
            request.closing_date, request.renewal_date, window
        ),
    }


@app.post("/api/v1/contracts/adjust")
async def adjust_contract(request: ContractAdjustRequest):
    """Valores ajustados de un contrato"""
    if request.process is not None:
        contract = adjuster.apply(request.contract, request.process)
    else:
        adjustment = adjuster.adjust(request.contract)
        contract = request.contract.model_copy(update={
            "adjusted_value": adjustment.adjusted_value,
            "adjusted_additional_specific_value": adjustment.adjusted_additional_specific_value,
        })
    return contract.model_dump(mode="json", by_alias=True)


@app.post("/api/v1/proponents/shares")
async def partner_shares(request: SharesRequest):
    """Porcentaje de experiencia por integrante de un proponente plural"""
    proponent = request.proponent
    shares = apportionment.compute_partner_shares(proponent)
    return {
        "shares": shares,
        "disability_eligible": {
            name: apportionment.meets_disability_threshold(proponent, name)
            for name in shares
        },
        "contributor_options": apportionment.contributor_options(proponent),
    }


@app.post("/api/v1/proponents/evaluate")
async def evaluate_proponent(request: EvaluationRequest):
    """Subsanación y motivos con los datos tal como llegan"""
    try:
        result = refresher.evaluator.evaluate(request.proponent, request.process)
        return result.to_dict()
    except Exception as e:
        logger.error(f"Error de evaluación: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@app.post("/api/v1/proponents/refresh")
async def refresh_proponent(request: EvaluationRequest):
    """Recalcula todos los campos derivados del proponente"""
    try:
        result = refresher.refresh(request.proponent, request.process)
    except Exception as e:
        logger.error(f"Error al recalcular proponente: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    return {
        "proponent": result.proponent.model_dump(mode="json", by_alias=True),
        "evaluation": result.evaluation.to_dict(),
        "partner_shares": result.partner_shares,
        "warnings": result.warnings,
    }


@app.post("/api/v1/report")
async def ranking_report(request: ReportRequest) -> Dict:
    """Resumen de evaluación con ranking por puntaje"""
    proponents = request.proponents
    if request.refresh:
        proponents = [r.proponent for r in refresher.refresh_all(proponents, request.process)]
    return report_generator.generate(request.process, proponents)


if __name__ == "__main__":
    import uvicorn

    host = os.getenv("API_HOST", "127.0.0.1")
    port = int(os.getenv("API_PORT", "8000"))

    uvicorn.run(app, host=host, port=port)
