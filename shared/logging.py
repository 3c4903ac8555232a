# shared/logging.py
import structlog
import logging
import sys
from typing import List, Optional

# Configure structured logging
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

# Get logger instance
logger = structlog.get_logger()

# Configure standard library logging
logging.basicConfig(
    format="%(message)s",
    stream=sys.stdout,
    level=logging.INFO,
)

def setup_logging(level: str = "INFO", json_logs: bool = True):
    """Setup logging configuration"""
    log_level = getattr(logging, level.upper())
    logging.getLogger().setLevel(log_level)

    if not json_logs:
        # Use human-readable format for development
        structlog.configure(
            processors=[
                structlog.stdlib.filter_by_level,
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.stdlib.PositionalArgumentsFormatter(),
                structlog.processors.TimeStamper(fmt="iso"),
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.UnicodeDecoder(),
                structlog.dev.ConsoleRenderer()
            ],
            context_class=dict,
            logger_factory=structlog.stdlib.LoggerFactory(),
            cache_logger_on_first_use=True,
        )

def log_classification(
    agent_type: str,
    confidence: float,
    complexity: str,
    template_count: int,
    alternatives: Optional[List[str]] = None,
    missing_capabilities: Optional[List[str]] = None
):
    """Log a completed classification"""
    extra_data = {
        "agent_type": agent_type,
        "confidence": confidence,
        "complexity": complexity,
        "template_count": template_count
    }

    if alternatives:
        extra_data["alternatives"] = alternatives

    if missing_capabilities:
        extra_data["missing_capabilities"] = missing_capabilities

    logger.info("Classification completed", **extra_data)

def log_partial_classification(
    archetype: str,
    confidence: int,
    raw_score: int,
    data_completeness: int
):
    """Log mid-interview archetype previews"""
    logger.info("Partial classification",
               archetype=archetype,
               confidence=confidence,
               raw_score=raw_score,
               data_completeness=data_completeness)
