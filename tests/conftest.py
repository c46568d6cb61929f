import pytest
import importlib.util
import logging

logger = logging.getLogger(__name__)


def pytest_configure(config):
    # Configure logging for test filtering information
    logging.basicConfig(
        level=logging.INFO,
        format='%(levelname)s: %(message)s'
    )

    # Register custom marker for pytest test collecting
    config.addinivalue_line(
        "markers",
        "requires_dependency(name): mark test as requiring a specific dependency", # to filter tests when required dependency is not installed
    )


def pytest_collection_modifyitems(config, items):
    """
    Centrally apply skips to test targets.

    Tests marked with `requires_dependency` are skipped when one of the dependencies is not installed.
    """
    skipped_dependency = 0
    for item in items:
        required_dependency_marker = item.get_closest_marker("requires_dependency")

        # Skip test if the required dependency is not installed
        if required_dependency_marker:
            if not all(importlib.util.find_spec(dependency) is not None for dependency in required_dependency_marker.args):
                skip = pytest.mark.skip(reason=f"Dependency {required_dependency_marker.args} not installed")
                item.add_marker(skip)
                skipped_dependency += 1

    if skipped_dependency > 0:
        logger.info(f"Skipped (missing dependency): {skipped_dependency}")
