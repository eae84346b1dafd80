"""Fetch tiers (direct HTTP + rendering service).

공개 API는 이 파일에서만 export합니다.
"""

from .executor import FetchExecutor
from .result import FetchResult, FetchSource
from .direct_executor import DirectFetchExecutor
from .render_executor import RenderFetchExecutor, DisabledRenderExecutor, build_render_executor

__all__ = [
        "FetchExecutor",
        "FetchResult",
        "FetchSource",
        "DirectFetchExecutor",
        "RenderFetchExecutor",
        "DisabledRenderExecutor",
        "build_render_executor",
]
