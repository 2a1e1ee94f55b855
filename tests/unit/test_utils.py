#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for dependency decorators, package checks, logging setup and exceptions."""
import logging

import pytest

from textview.exceptions import DependencyError, InvalidOptionsError, TextViewError, ValidationError
from textview.logging_utils import PACKAGE_LOGGER_NAME, configure_logging, reset_logging
from textview.utils.decorators import debug_timer, requires_dependencies
from textview.utils.packages import check_dependencies, check_version_requirement, get_package_version


@pytest.mark.unit
class TestRequiresDependencies:
    """Test the dependency-checking decorator."""

    def test_available_dependency_runs_method(self) -> None:
        @requires_dependencies("markdown", [("mistune", "mistune", ">=3.0.0")])
        def parse() -> str:
            return "ok"

        assert parse() == "ok"

    def test_missing_dependency_raises(self) -> None:
        @requires_dependencies("example", [("not-a-real-package", "not_a_real_package_xyz", ">=1.0")])
        def parse() -> str:
            return "unreachable"

        with pytest.raises(DependencyError) as exc_info:
            parse()
        error = exc_info.value
        assert error.missing_packages == [("not-a-real-package", ">=1.0")]
        assert isinstance(error.original_import_error, ImportError)
        assert "pip install" in str(error)

    def test_version_mismatch_raises(self) -> None:
        @requires_dependencies("markdown", [("mistune", "mistune", ">=999.0")])
        def parse() -> str:
            return "unreachable"

        with pytest.raises(DependencyError) as exc_info:
            parse()
        assert exc_info.value.version_mismatches[0][0] == "mistune"

    def test_wraps_preserves_name(self) -> None:
        @requires_dependencies("markdown", [])
        def parse_source() -> None:
            """Doc."""

        assert parse_source.__name__ == "parse_source"
        assert parse_source.__doc__ == "Doc."


@pytest.mark.unit
class TestDebugTimer:
    """Test the timing context manager."""

    def test_logs_when_debug_enabled(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = logging.getLogger("textview.tests.timer")
        with caplog.at_level(logging.DEBUG, logger="textview.tests.timer"):
            with debug_timer(logger, "Parsing (test)"):
                pass
        assert "Parsing (test) completed in" in caplog.text

    def test_silent_otherwise(self, caplog: pytest.LogCaptureFixture) -> None:
        logger = logging.getLogger("textview.tests.quiet")
        with caplog.at_level(logging.INFO, logger="textview.tests.quiet"):
            with debug_timer(logger, "Parsing (test)"):
                pass
        assert "completed in" not in caplog.text


@pytest.mark.unit
class TestPackages:
    """Test installed package inspection."""

    def test_installed_version(self) -> None:
        assert get_package_version("mistune") is not None
        assert get_package_version("not-a-real-package-xyz") is None

    def test_requirement_met(self) -> None:
        meets, installed = check_version_requirement("rich", ">=1.0")
        assert meets
        assert installed

    def test_missing_package(self) -> None:
        assert check_version_requirement("not-a-real-package-xyz", ">=1.0") == (False, None)

    def test_invalid_specifier_is_permissive(self) -> None:
        meets, _ = check_version_requirement("rich", "not a spec")
        assert meets


@pytest.mark.unit
class TestConfigureLogging:
    """Test host-side logging configuration."""

    @pytest.fixture(autouse=True)
    def _restore_logging(self):
        yield
        reset_logging()

    def test_sets_level_and_replaces_own_handlers(self) -> None:
        package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
        before = len(package_logger.handlers)
        configured = configure_logging("debug")
        configure_logging(logging.DEBUG)
        assert configured is package_logger
        assert package_logger.level == logging.DEBUG
        assert len(package_logger.handlers) == before + 1

    def test_host_handlers_are_kept(self) -> None:
        package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
        host_handler = logging.NullHandler()
        package_logger.addHandler(host_handler)
        try:
            configure_logging("INFO")
            reset_logging()
            assert host_handler in package_logger.handlers
        finally:
            package_logger.removeHandler(host_handler)

    def test_reset_restores_defaults(self) -> None:
        package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
        before = list(package_logger.handlers)
        configure_logging("WARNING")
        reset_logging()
        assert package_logger.handlers == before
        assert package_logger.level == logging.NOTSET

    def test_unknown_level_name_falls_back_to_info(self) -> None:
        assert configure_logging("chatty").level == logging.INFO

    def test_log_file(self, tmp_path) -> None:
        log_file = tmp_path / "textview.log"
        package_logger = configure_logging("INFO", log_file=str(log_file), trace_mode=True)
        logging.getLogger("textview.tests").info("hello file")
        for handler in package_logger.handlers:
            handler.flush()
        content = log_file.read_text(encoding="utf-8")
        assert "hello file" in content
        assert "[textview.tests]" in content


@pytest.mark.unit
class TestCheckDependencies:
    """Test the dependency report used by the parser and renderer guards."""

    def test_all_present(self) -> None:
        report = check_dependencies([("mistune", "mistune", ">=3.0.0"), ("rich", "rich", "")])
        assert report.ok
        assert report.import_error is None

    def test_missing_and_mismatched(self) -> None:
        report = check_dependencies(
            [("not-a-real-package", "not_a_real_package_xyz", ">=1.0"), ("rich", "rich", ">=999.0")]
        )
        assert not report.ok
        assert report.missing == [("not-a-real-package", ">=1.0")]
        assert [(name, spec) for name, spec, _ in report.mismatches] == [("rich", ">=999.0")]
        assert isinstance(report.import_error, ImportError)


@pytest.mark.unit
class TestExceptions:
    """Test the exception hierarchy."""

    def test_hierarchy(self) -> None:
        assert issubclass(InvalidOptionsError, ValidationError)
        assert issubclass(ValidationError, TextViewError)
        assert issubclass(DependencyError, TextViewError)

    def test_invalid_options_message(self) -> None:
        error = InvalidOptionsError(component_name="html", expected_type=int, received_type=str)
        assert "html expected options of type 'int' but received 'str'" in str(error)
        assert error.parameter_name == "options"
