"""
Core infrastructure for png_secret.
"""

from png_secret.core.log_manager import setup_logging
from png_secret.core.base_pipeline import BasePipeline

__all__ = ["setup_logging", "BasePipeline"]
