#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Verificación de códigos del clasificador (UNSPSC) de los contratos.
"""

import logging
from typing import Iterable

logger = logging.getLogger(__name__)


class ClassifierMatcher:
    """
    Un contrato es válido si comparte al menos un código con el proceso.

    Si el proceso no define códigos, el resultado lo decide empty_matches.
    """

    def __init__(self, empty_matches: bool = True):
        self.empty_matches = empty_matches

    def matches(self, selected_codes: Iterable[str], process_codes: Iterable[str]) -> bool:
        required = {str(code).strip() for code in process_codes or [] if code is not None}
        required.discard("")
        if not required:
            return self.empty_matches

        selected = {str(code).strip() for code in selected_codes or [] if code is not None}
        return not selected.isdisjoint(required)
