"""
Behave environment configuration for Domain Records Manager scenarios.
"""

import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def before_all(context):
    """Set up test environment before all tests."""
    context.test_config = {
        "providers": {"mock": {}},
        "default_provider": "mock",
    }
    logger.info("Test environment setup complete")


def before_scenario(context, scenario):
    """Set up each test scenario."""
    context.scenario_name = scenario.name
    context.fields = {}
    context.error = None
    context.result = None
    logger.info(f"Starting scenario: {scenario.name}")


def after_scenario(context, scenario):
    """Clean up after each test scenario."""
    logger.info(f"Completed scenario: {scenario.name}")
