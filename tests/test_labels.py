"""Tests for label formatting."""

from prompter_lib.prompter import format_label, prompt_message


def test_blank_default_leaves_label_unchanged():
    assert format_label("Name", "") == "Name"
    assert format_label("Name", "   ") == "Name"
    assert format_label("Name") == "Name"


def test_default_is_appended():
    assert format_label("Name", "bob") == "Name (default: bob)"


def test_default_keeps_surrounding_whitespace():
    assert format_label("Name", " bob ") == "Name (default:  bob )"


def test_prompt_message():
    assert prompt_message("Name (default: bob)") == "Name (default: bob): "
