"""
Unit tests for prompter.py
"""

from unittest.mock import MagicMock

import pytest

from github_visibility import InputError
from prompter import parse_privacy, prompt_for_token, prompt_user_input


class TestParsePrivacy:

    def test_true(self):
        assert parse_privacy("true") is True

    def test_false(self):
        assert parse_privacy("false") is False

    def test_surrounding_whitespace(self):
        assert parse_privacy("  true\n") is True

    @pytest.mark.parametrize("value", ["yes", "no", "y", "TRUE", "False", "1", ""])
    def test_rejects_other_tokens(self, value):
        with pytest.raises(InputError):
            parse_privacy(value)


class TestPrompts:

    def test_prompt_user_input_strips(self):
        input_func = MagicMock(return_value="  lloydlobo \n")
        assert prompt_user_input("Enter username: ", input_func) == "lloydlobo"
        input_func.assert_called_once_with("Enter username: ")

    def test_prompt_for_token_uses_getpass(self):
        getpass_func = MagicMock(return_value="abc123\n")
        assert prompt_for_token(getpass_func) == "abc123"
        getpass_func.assert_called_once_with("Enter token: ")
