"""API dependencies for dependency injection."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from smartrfp.analysis.analyzer import RFPAnalyzer
from smartrfp.config import Settings, get_settings


@lru_cache()
def get_analyzer() -> RFPAnalyzer:
    """Get or create the shared, stateless RFP analyzer."""
    return RFPAnalyzer()


# Type aliases for dependency injection
AnalyzerDep = Annotated[RFPAnalyzer, Depends(get_analyzer)]
SettingsDep = Annotated[Settings, Depends(get_settings)]
