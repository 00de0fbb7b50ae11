"""Tests for the validation engine: aggregation, ordering, sealing, concurrency."""

import io
import itertools
import json
from concurrent.futures import ThreadPoolExecutor

import pytest

from passguard.log_config import configure_logging
from passguard.validators import (
    DigitRule,
    MinLengthRule,
    RuleCode,
    RuleSetSealedError,
    SpecialCharacterRule,
    UppercaseRule,
    ValidationEngine,
    build_default_rules,
)


def test_common_lowercase_password_fails_four_rules(engine):
    result = engine.validate("password")

    assert not result.passed
    assert result.codes == [
        RuleCode.MISSING_UPPERCASE,
        RuleCode.MISSING_SPECIAL,
        RuleCode.MISSING_DIGIT,
        RuleCode.COMMON_PASSWORD,
    ]
    assert result.failure_count == 4


def test_strong_password_passes_every_rule(engine):
    result = engine.validate("Password123!")

    assert result.passed
    assert result.diagnostics == []
    assert result.messages == []


def test_short_repeated_password_fails_five_rules(engine):
    result = engine.validate("aaa")

    assert result.codes == [
        RuleCode.MIN_LENGTH,
        RuleCode.MISSING_UPPERCASE,
        RuleCode.MISSING_SPECIAL,
        RuleCode.MISSING_DIGIT,
        RuleCode.REPEATED_CHARACTERS,
    ]


def test_empty_password_fails_every_content_rule(engine):
    result = engine.validate("")

    assert result.codes == [
        RuleCode.MIN_LENGTH,
        RuleCode.MISSING_UPPERCASE,
        RuleCode.MISSING_SPECIAL,
        RuleCode.MISSING_DIGIT,
    ]


def test_does_not_stop_at_first_failure(engine):
    # Fails every default rule except the denylist
    result = engine.validate("a   a")

    assert RuleCode.MIN_LENGTH in result.codes
    assert RuleCode.CONTAINS_WHITESPACE in result.codes
    assert result.failure_count == 6


def test_messages_match_diagnostics_in_order(engine):
    result = engine.validate("aaa")

    assert result.messages == [d.message for d in result.diagnostics]
    assert result.messages[0] == "Password must be at least 8 characters long"


@pytest.mark.parametrize("password", ["", "a", "Ab1!", "Short1!", "ZZZ"])
def test_short_inputs_always_report_length(engine, password):
    assert RuleCode.MIN_LENGTH in engine.validate(password).codes


@pytest.mark.parametrize(
    "password, has_special",
    [
        ("NoSpecial123", False),
        ("WithSpecial123!", True),
        ("", False),
        ("under_score", True),
    ],
)
def test_special_diagnostic_iff_no_special_character(engine, password, has_special):
    assert (RuleCode.MISSING_SPECIAL in engine.validate(password).codes) is not has_special


@pytest.mark.parametrize("password", ["", "aaa", "password", "Password123!", "hello world"])
def test_validate_is_idempotent(engine, password):
    assert engine.validate(password) == engine.validate(password)


def test_rule_order_changes_ordering_but_not_membership():
    rules = build_default_rules()
    baseline = ValidationEngine(rules).validate("aaa")

    for permutation in itertools.permutations(rules[:4]):
        result = ValidationEngine(list(permutation) + rules[4:]).validate("aaa")
        assert sorted(result.codes) == sorted(baseline.codes)

    reversed_result = ValidationEngine(list(reversed(rules))).validate("aaa")
    assert reversed_result.codes == list(reversed(baseline.codes))


def test_empty_rule_set_accepts_everything():
    engine = ValidationEngine([])

    assert engine.rules == ()
    assert engine.validate("").passed


def test_default_constructor_uses_configured_rules():
    engine = ValidationEngine()

    assert [r.name for r in engine.rules] == [
        "MinLengthRule",
        "UppercaseRule",
        "SpecialCharacterRule",
        "DigitRule",
        "WhitespaceRule",
        "CommonPasswordRule",
        "RepeatedCharacterRule",
    ]


def test_register_rule_appends_in_order():
    engine = ValidationEngine([])
    engine.register_rule(DigitRule())
    engine.register_rule(UppercaseRule())

    assert engine.validate("abc").codes == [RuleCode.MISSING_DIGIT, RuleCode.MISSING_UPPERCASE]


def test_duplicate_rules_report_twice():
    engine = ValidationEngine([MinLengthRule(), MinLengthRule()])

    assert engine.validate("short").codes == [RuleCode.MIN_LENGTH, RuleCode.MIN_LENGTH]


@pytest.mark.parametrize("not_a_rule", [None, "MinLengthRule", lambda password: None])
def test_register_rejects_non_rules(not_a_rule):
    engine = ValidationEngine([])

    with pytest.raises(TypeError):
        engine.register_rule(not_a_rule)


def test_first_validation_seals_rule_set():
    engine = ValidationEngine([MinLengthRule()])
    assert not engine.sealed

    engine.validate("anything")

    assert engine.sealed
    with pytest.raises(RuleSetSealedError):
        engine.register_rule(DigitRule())
    with pytest.raises(RuleSetSealedError):
        engine.remove_rule("MinLengthRule")


def test_remove_rule_before_sealing():
    engine = ValidationEngine(build_default_rules())
    engine.remove_rule("CommonPasswordRule")

    assert RuleCode.COMMON_PASSWORD not in engine.validate("password").codes


def test_seal_is_idempotent():
    engine = ValidationEngine([SpecialCharacterRule()])
    engine.seal()
    engine.seal()

    assert engine.sealed
    assert engine.validate("x").codes == [RuleCode.MISSING_SPECIAL]


def test_concurrent_validation_matches_sequential(engine):
    passwords = ["", "aaa", "password", "Password123!", "two words!", "ÉCOLE١!ab"] * 50
    expected = [engine.validate(p) for p in passwords]

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(engine.validate, passwords))

    assert results == expected


def test_validation_log_never_contains_password(engine):
    buffer = io.StringIO()
    configure_logging(log_level="debug", stream=buffer)

    engine.validate("SecretXyz9!")

    output = buffer.getvalue()
    assert "validation_complete" in output
    assert "SecretXyz9!" not in output
    assert "SecretXyz9" not in output


def test_rule_registered_logs_position():
    buffer = io.StringIO()
    configure_logging(log_level="debug", stream=buffer)

    ValidationEngine([MinLengthRule(), DigitRule(), UppercaseRule()])

    events = [json.loads(line) for line in buffer.getvalue().splitlines()]
    registered = [e for e in events if e["event"] == "rule_registered"]
    assert [e["position"] for e in registered] == [1, 2, 3]
    assert [e["rule"] for e in registered] == ["MinLengthRule", "DigitRule", "UppercaseRule"]
