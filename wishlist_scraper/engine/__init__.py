"""Engine Layer - Core Orchestration and Pipeline Management

This module provides the core engine layer for the scraper, implementing:
- ProductExtractor: Main entry point (validate → fetch → extract → assemble)
- FetchOrchestrator: Direct → Rendered fetch tiers
- BudgetConfig: Per-tier timeout configuration
- ExtractionResult: Standardized result format
"""

from .budget import BudgetConfig
from .extractor import ProductExtractor
from .orchestrator import FetchOrchestrator
from .result import ExtractionResult

# 추출 규칙(체인 순서/사이트 규칙)이 바뀔 때 올린다
ENGINE_VERSION = "2"

__all__ = [
    "ENGINE_VERSION",
    "ProductExtractor",
    "FetchOrchestrator",
    "BudgetConfig",
    "ExtractionResult",
]
