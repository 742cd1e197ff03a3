"""
Тесты для Oracle Runner

Проверяет:
1. VerificationReport: число случаев, первый контрпример, bool
2. NumberTowerError внутри случая — провал случая, а не исключение
3. Прочие исключения пробрасываются
4. check_preservation ловит несогласованную операцию
5. Логирование провала (WARNING)
6. verdict: булев итог без исключений на некорректных входах
"""

import logging

import pytest

from numtower.core.errors import ConstructionPreconditionError, DomainArithmeticError
from numtower.isomorphism.oracle import (
    VerificationReport,
    check_preservation,
    run_oracle,
    sample_pairs,
    verdict,
)


class TestRunOracle:
    def test_all_pass(self) -> None:
        report = run_oracle("even squares", [2, 4, 6], lambda x: (x * x) % 2 == 0)
        assert report == VerificationReport(name="even squares", cases=3, passed=True)
        assert bool(report)

    def test_stops_at_first_counterexample(self) -> None:
        report = run_oracle("below three", [1, 2, 5, 0, 7], lambda x: x < 3)
        assert not report
        assert report.cases == 3
        assert report.counterexample == "5"

    def test_empty_cases_pass(self) -> None:
        report = run_oracle("nothing", [], lambda x: False)
        assert report.passed
        assert report.cases == 0

    def test_tower_error_is_failure(self) -> None:
        def check(x: int) -> bool:
            if x == 0:
                raise DomainArithmeticError("Division by zero: 1 / 0")
            return True

        report = run_oracle("reciprocals", [2, 1, 0, 3], check)
        assert not report.passed
        assert report.cases == 3
        assert "DomainArithmeticError" in report.counterexample

    def test_programming_errors_propagate(self) -> None:
        def check(x: int) -> bool:
            raise KeyError("bug")

        with pytest.raises(KeyError):
            run_oracle("buggy", [1], check)

    def test_failure_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="numtower.isomorphism.oracle"):
            run_oracle("always false", [42], lambda x: False)
        assert "always false" in caplog.text
        assert "42" in caplog.text


class TestSamplePairs:
    def test_all_ordered_pairs(self) -> None:
        assert sample_pairs([1, 2]) == [(1, 1), (1, 2), (2, 1), (2, 2)]


class TestCheckPreservation:
    def test_consistent_operation(self) -> None:
        pairs = sample_pairs([str(k) for k in range(5)])
        report = check_preservation(
            "string addition", pairs, lambda a, b: str(int(a) + int(b)), lambda x, y: x + y, int
        )
        assert report.passed
        assert report.cases == 25

    def test_broken_operation(self) -> None:
        pairs = sample_pairs([str(k) for k in range(5)])
        report = check_preservation(
            "broken", pairs, lambda a, b: str(int(a) - int(b)), lambda x, y: x + y, int
        )
        assert not report.passed
        assert report.counterexample == "('0', '1')"

    def test_custom_agreement(self) -> None:
        report = check_preservation(
            "approximate",
            [(1.0, 3.0)],
            lambda a, b: a / b,
            lambda x, y: x / y,
            lambda value: round(value, 3),
            agree=lambda x, y: abs(x - y) < 1e-2,
        )
        assert report.passed


class TestVerdict:
    def test_passes_report_through(self) -> None:
        def check(bound: int) -> VerificationReport:
            return run_oracle("small", range(bound), lambda x: x < 10)

        assert verdict(check, 5) is True
        assert verdict(check, 20) is False

    def test_rejected_inputs_are_false(self, caplog: pytest.LogCaptureFixture) -> None:
        def check_bounded(bound: int) -> VerificationReport:
            if bound < 0:
                raise ConstructionPreconditionError(f"bound must be a natural number, got {bound}")
            return run_oracle("bounded", range(bound), lambda x: True)

        with caplog.at_level(logging.WARNING, logger="numtower.isomorphism.oracle"):
            assert verdict(check_bounded, -3) is False
        assert "check_bounded" in caplog.text
        assert "-3" in caplog.text

    def test_other_errors_propagate(self) -> None:
        def check(bound: int) -> VerificationReport:
            raise KeyError("bug")

        with pytest.raises(KeyError):
            verdict(check, 1)
