"""
Memory pre-flight checks for Turtle loading.

Parsed triples and their indices live entirely in memory, so a document is
measured against the available system memory before it is parsed. The
estimate assumes the store needs roughly ``MEMORY_MULTIPLIER`` times the
size of the source text.

Example:
    can_proceed, message = MemoryManager.check_memory_available(12.5)
    if not can_proceed:
        raise MemoryError(message)
"""

import logging
from typing import Optional, Tuple

import psutil

from ..config import MemoryLimits

logger = logging.getLogger(__name__)


class MemoryManager:
    """
    Guard against loading Turtle documents that would exhaust memory.

    Attributes:
        MIN_AVAILABLE_MB: Minimum free memory required before any load.
        MAX_SAFE_CONTENT_MB: Largest document accepted without forcing.
        MEMORY_MULTIPLIER: Estimated memory/content size ratio.
        LOAD_FACTOR: Fraction of available memory treated as the safe threshold.
    """

    MIN_AVAILABLE_MB = MemoryLimits.MIN_AVAILABLE_MEMORY_MB
    MAX_SAFE_CONTENT_MB = MemoryLimits.MAX_SAFE_CONTENT_MB
    MEMORY_MULTIPLIER = MemoryLimits.MEMORY_MULTIPLIER
    LOAD_FACTOR = MemoryLimits.LOAD_FACTOR

    @staticmethod
    def get_available_memory_mb() -> float:
        """
        Get available system memory in MB.

        Returns:
            Available memory in MB, or infinity if detection fails.
        """
        try:
            return psutil.virtual_memory().available / (1024 * 1024)
        except (OSError, RuntimeError) as e:
            logger.warning(f"Could not determine available memory: {e}")
            return float("inf")

    @staticmethod
    def get_memory_usage_mb() -> float:
        """Get current process memory usage in MB."""
        try:
            return psutil.Process().memory_info().rss / (1024 * 1024)
        except (OSError, psutil.Error):
            return 0.0

    @classmethod
    def check_memory_available(
        cls,
        content_size_mb: float,
        force: bool = False,
        max_content_mb: Optional[float] = None,
    ) -> Tuple[bool, str]:
        """
        Check if enough memory is available to parse a document.

        Args:
            content_size_mb: Size of the Turtle text in MB.
            force: If True, skip the size limit and proceed with a warning.
            max_content_mb: Override for ``MAX_SAFE_CONTENT_MB``.

        Returns:
            Tuple of (can_proceed, message).
        """
        limit_mb = max_content_mb if max_content_mb is not None else cls.MAX_SAFE_CONTENT_MB
        estimated_usage_mb = content_size_mb * cls.MEMORY_MULTIPLIER

        if not force and content_size_mb > limit_mb:
            return False, (
                f"Turtle content ({content_size_mb:.1f}MB) exceeds safe limit ({limit_mb}MB). "
                f"Estimated memory required: ~{estimated_usage_mb:.0f}MB. "
                f"Split the document or enable force_large_content."
            )

        available_mb = cls.get_available_memory_mb()
        if available_mb == float("inf"):
            return True, f"Memory check unavailable. Proceeding with {content_size_mb:.1f}MB of content."

        if available_mb < cls.MIN_AVAILABLE_MB:
            return False, (
                f"Insufficient free memory. "
                f"Available: {available_mb:.0f}MB, "
                f"Minimum required: {cls.MIN_AVAILABLE_MB}MB."
            )

        safe_threshold_mb = available_mb * cls.LOAD_FACTOR
        if estimated_usage_mb > safe_threshold_mb:
            if force:
                return True, (
                    f"WARNING: Content may exceed safe memory limits. "
                    f"Estimated usage: ~{estimated_usage_mb:.0f}MB, "
                    f"Safe threshold: {safe_threshold_mb:.0f}MB. Proceeding because forced."
                )
            return False, (
                f"Turtle content may be too large for available memory. "
                f"Content size: {content_size_mb:.1f}MB, "
                f"Estimated memory: ~{estimated_usage_mb:.0f}MB, "
                f"Safe threshold: {safe_threshold_mb:.0f}MB "
                f"(Available: {available_mb:.0f}MB)."
            )

        return True, (
            f"Memory OK: content {content_size_mb:.2f}MB, "
            f"estimated usage ~{estimated_usage_mb:.0f}MB of {available_mb:.0f}MB available"
        )

    @classmethod
    def log_memory_status(cls, context: str = "") -> None:
        """Log current memory status at debug level."""
        if not logger.isEnabledFor(logging.DEBUG):
            return
        prefix = f"[{context}] " if context else ""
        logger.debug(
            f"{prefix}Memory status: Process using {cls.get_memory_usage_mb():.0f}MB, "
            f"System available: {cls.get_available_memory_mb():.0f}MB"
        )
