"""Test the options model and rule validation."""

import pytest

from cjklint.errors import OptionsError
from cjklint.options import DEFAULT_RULES, Options, validate_rules


class TestOptions:
    def test_read_only(self):
        options = Options({"trimSpace": True})
        with pytest.raises(TypeError):
            options.rules["trimSpace"] = False

    def test_flag(self):
        options = Options({"trimSpace": True, "noSpaceInsideMark": None, "odd": "yes"})
        assert options.flag("trimSpace") is True
        assert options.flag("noSpaceInsideMark") is None
        assert options.flag("odd") is None
        assert options.flag("absent") is None

    def test_text(self):
        options = Options({"unifiedPunctuation": "simplified"})
        assert options.text("unifiedPunctuation") == "simplified"
        assert options.text("absent") is None

    def test_coerce(self):
        options = Options({"trimSpace": True})
        assert Options.coerce(options) is options
        assert Options.coerce(None).rules == {}
        assert Options.coerce({"rules": {"trimSpace": True}}).flag("trimSpace") is True


class TestValidateRules:
    def test_default_preset_is_valid(self):
        validate_rules(DEFAULT_RULES)

    def test_unknown_names_pass(self):
        validate_rules({"somethingNew": 42})

    def test_non_bool(self):
        with pytest.raises(OptionsError, match="trimSpace"):
            validate_rules({"trimSpace": "yes"})

    def test_non_string_charset(self):
        with pytest.raises(OptionsError):
            validate_rules({"halfWidthPunctuation": 1})

    def test_duplicate_characters(self):
        with pytest.raises(OptionsError, match="more than once"):
            validate_rules({"fullWidthPunctuation": "，，"})

    def test_unknown_unification_mode(self):
        with pytest.raises(OptionsError, match="unifiedPunctuation"):
            validate_rules({"unifiedPunctuation": "classic"})

    def test_pair_in_both_charsets(self):
        with pytest.raises(OptionsError, match="both"):
            validate_rules({"halfWidthPunctuation": "()", "fullWidthPunctuation": "（"})

    def test_quote_in_both_charsets(self):
        with pytest.raises(OptionsError):
            validate_rules({"halfWidthPunctuation": '"', "fullWidthPunctuation": "“”"})

    def test_none_means_undefined(self):
        validate_rules({"trimSpace": None})
