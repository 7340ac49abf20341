"""유틸리티 모듈"""

from app.core.utils.time import measure_time

__all__ = [
    "measure_time",
]
