"""Tests for TreeConfig and RenderConfig validation."""

import pytest

from searchtreelib import (
    BinarySearchTree,
    ConfigurationError,
    DuplicatePolicy,
    RenderConfig,
    TreeConfig,
)


class TestTreeConfig:

    def test_defaults(self):
        config = TreeConfig()
        assert config.duplicate_policy is DuplicatePolicy.WARN
        assert config.on_duplicate is None
        assert config.validate() == []

    def test_convenience_constructors(self):
        assert TreeConfig.strict().duplicate_policy is DuplicatePolicy.RAISE
        assert TreeConfig.quiet().duplicate_policy is DuplicatePolicy.IGNORE

    def test_policy_must_be_enum(self):
        errors = TreeConfig(duplicate_policy="warn").validate()
        assert len(errors) == 1
        assert "duplicate_policy" in errors[0]

    def test_callback_must_be_callable(self):
        errors = TreeConfig(on_duplicate=42).validate()
        assert errors == ["on_duplicate must be callable"]

    def test_render_errors_are_included(self):
        config = TreeConfig(render=RenderConfig(vertical="|"))
        assert any("same width" in e for e in config.validate())

    def test_tree_rejects_invalid_config(self):
        with pytest.raises(ConfigurationError) as exc_info:
            BinarySearchTree([1, 2], config=TreeConfig(on_duplicate="print"))
        assert "Invalid configuration" in str(exc_info.value)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            BinarySearchTree(config=TreeConfig(render=None))


class TestRenderConfig:

    def test_defaults_are_valid(self):
        assert RenderConfig().validate() == []

    def test_blank_must_be_whitespace(self):
        errors = RenderConfig(blank="....").validate()
        assert errors == ["blank connector must be whitespace"]

    def test_equal_width_custom_connectors(self):
        config = RenderConfig(vertical="|  ", blank="   ", left_branch="`--", right_branch=",--")
        assert config.validate() == []
